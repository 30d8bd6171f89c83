"""
Node Deployment Script
Deploys Node("BACHI NODE", "BACHI", NODE_MANAGER_ADDRESS)

Usage:
    python -m scripts.deploy_bachi_node   (from the project root)

Env required:
    RPC_URL, YOUR_PRIVATE_KEY, NODE_MANAGER_ADDRESS
"""

import sys

from deployer.cli import main
from deployer.plans import BACHI_NODE


if __name__ == "__main__":
    sys.exit(main(BACHI_NODE))

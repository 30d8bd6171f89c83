"""
NodeManager Deployment Script
Deploys NodeManager(NODE_CONTRACT_ADDRESS)

Usage:
    python -m scripts.deploy_node_manager   (from the project root)

Env required:
    RPC_URL, YOUR_PRIVATE_KEY, NODE_CONTRACT_ADDRESS
"""

import sys

from deployer.cli import main
from deployer.plans import NODE_MANAGER


if __name__ == "__main__":
    sys.exit(main(NODE_MANAGER))

"""
BachiToken Deployment Script
Deploys BachiToken("BachiToken", "BN") to the configured network

Usage:
    python -m scripts.deploy_bachi_token   (from the project root)
"""

import sys

from deployer.cli import main
from deployer.plans import BACHI_TOKEN


if __name__ == "__main__":
    sys.exit(main(BACHI_TOKEN))

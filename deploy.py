"""
Contract Deployment Wrapper
Runs scripts.deploy_<plan> for one of the Bachi contracts

Usage:
    python deploy.py bachi_token|bachi_node|node_manager
"""

import subprocess
import sys
from pathlib import Path

from deployer.plans import PLANS

PROJECT_ROOT = Path(__file__).resolve().parent


def main(argv) -> int:
    if len(argv) != 1 or argv[0] not in PLANS:
        print(f"Usage: python deploy.py [{'|'.join(PLANS)}]")
        return 1

    plan = argv[0]

    print("=" * 70)
    print(f"Bachi Contract Deployment: {PLANS[plan].contract_name}")
    print("=" * 70)
    print()

    result = subprocess.run(
        [sys.executable, "-m", f"scripts.deploy_{plan}"],
        cwd=PROJECT_ROOT
    )

    return result.returncode


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

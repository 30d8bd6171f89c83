"""
Deployment CLI
Shared entry point behind scripts/deploy_*.py and the console scripts
"""

import os
import sys
from pathlib import Path
from typing import Callable, Mapping, Optional, TextIO, Union

from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import ConfigurationError, DeploymentFailure
from blockchain.network_config import DEFAULT_CONFIG_PATH, NetworkConfig, load_network_config

from .deployment_runner import DeploymentRunner
from .log_config import configure_logging
from .models import DeploymentRequest
from .plans import BACHI_NODE, BACHI_TOKEN, NODE_MANAGER, DeploymentPlan


def run_deployment(
    plan: DeploymentPlan,
    env: Optional[Mapping[str, str]] = None,
    network: Optional[str] = None,
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    runner_factory: Callable[[NetworkConfig], DeploymentRunner] = DeploymentRunner,
    out: Optional[TextIO] = None
) -> int:
    """
    Deploy one planned contract and print the outcome

    Args:
        plan: Which contract to deploy
        env: Environment mapping (None = process environment)
        network: Network name (None = DEPLOY_NETWORK or the configured default)
        config_path: Path to networks.json
        runner_factory: Builds the runner from the loaded config
        out: Stream for the result lines (None = stdout)

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    if env is None:
        env = os.environ
    if out is None:
        out = sys.stdout

    # Fail fast, before touching the network
    try:
        config = load_network_config(network or env.get('DEPLOY_NETWORK') or None, config_path, env)
        args = plan.build_args(env)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        runner = runner_factory(config)
        result = runner.deploy(DeploymentRequest(plan.contract_name, args))
    except DeploymentFailure as e:
        logger.error(str(e))
        return 1

    for line in result.summary_lines():
        print(line, file=out)

    return 0


def main(plan: DeploymentPlan) -> int:
    """Script entry point: load .env, configure logging, deploy"""
    load_dotenv()
    configure_logging(
        level=os.getenv('LOG_LEVEL', 'INFO'),
        log_file=os.getenv('DEPLOY_LOG_FILE')
    )
    return run_deployment(plan)


def deploy_bachi_token():
    sys.exit(main(BACHI_TOKEN))


def deploy_bachi_node():
    sys.exit(main(BACHI_NODE))


def deploy_node_manager():
    sys.exit(main(NODE_MANAGER))

"""
Deployment Plans
The Bachi contracts and how their constructor arguments are assembled
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple

from blockchain.network_config import require_address


@dataclass(frozen=True)
class DeploymentPlan:
    """Contract name plus a builder for its constructor arguments"""
    key: str
    contract_name: str
    build_args: Callable[[Mapping[str, str]], Tuple[Any, ...]]


def _bachi_token_args(env: Mapping[str, str]) -> Tuple[Any, ...]:
    return ("BachiToken", "BN")


def _bachi_node_args(env: Mapping[str, str]) -> Tuple[Any, ...]:
    # Manager address is explicit; set it to the deployer to bootstrap
    return ("BACHI NODE", "BACHI", require_address(env, "NODE_MANAGER_ADDRESS"))


def _node_manager_args(env: Mapping[str, str]) -> Tuple[Any, ...]:
    return (require_address(env, "NODE_CONTRACT_ADDRESS"),)


BACHI_TOKEN = DeploymentPlan("bachi_token", "BachiToken", _bachi_token_args)
BACHI_NODE = DeploymentPlan("bachi_node", "Node", _bachi_node_args)
NODE_MANAGER = DeploymentPlan("node_manager", "NodeManager", _node_manager_args)

PLANS: Dict[str, DeploymentPlan] = {
    plan.key: plan for plan in (BACHI_TOKEN, BACHI_NODE, NODE_MANAGER)
}

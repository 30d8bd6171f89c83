"""
Deployment Models
Request and result values exchanged with the DeploymentRunner
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class DeploymentRequest:
    """One contract to deploy, its constructor arguments and who signs"""
    contract_name: str
    constructor_args: Tuple[Any, ...] = ()
    signer: Union[int, str] = 0

    def __post_init__(self):
        if not self.contract_name:
            raise ValueError("contract_name must not be empty")
        # Freeze whatever sequence was passed in
        object.__setattr__(self, 'constructor_args', tuple(self.constructor_args))


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a confirmed contract-creation transaction"""
    contract_name: str
    address: str
    tx_hash: str
    deployer: str
    block_number: Optional[int] = None
    gas_used: Optional[int] = None

    def summary_lines(self):
        """Console lines printed after a successful deployment"""
        return [
            "Contract deployed successfully.",
            f"Deployer: {self.deployer}",
            f"Deployed to: {self.address}",
            f"Transaction hash: {self.tx_hash}",
        ]

"""
Deployment Exceptions
Error kinds raised while configuring and running contract deployments
"""

from typing import Optional


class ConfigurationError(Exception):
    """Missing or invalid network, account or constructor configuration"""


class ArtifactError(Exception):
    """Compiled contract artifact could not be resolved or is unusable"""


class DeploymentFailure(Exception):
    """
    Single failure kind surfaced by a deployment

    Wraps whatever went wrong (unreachable RPC, unfunded signer, reverted
    constructor, bad arguments) without classifying it.
    """

    def __init__(self, contract_name: str, cause: Optional[BaseException] = None):
        self.contract_name = contract_name
        self.cause = cause

        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "unknown error"
        super().__init__(f"Deployment of {contract_name} failed: {detail}")

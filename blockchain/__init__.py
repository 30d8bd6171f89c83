"""
Blockchain Interaction Package
Handles contract artifacts, signer accounts and network configuration
"""

from .artifacts import ArtifactStore, ContractArtifact
from .exceptions import ArtifactError, ConfigurationError, DeploymentFailure
from .network_config import NetworkConfig, load_network_config, require_address
from .signer import SignerRegistry

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ArtifactError',
    'ConfigurationError',
    'DeploymentFailure',
    'NetworkConfig',
    'load_network_config',
    'require_address',
    'SignerRegistry'
]

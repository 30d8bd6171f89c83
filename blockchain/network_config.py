"""
Network Configuration
Builds an explicit NetworkConfig from config/networks.json and the environment
"""

import json
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

from web3 import Web3
from loguru import logger

from .exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "networks.json"


@dataclass(frozen=True)
class NetworkConfig:
    """
    Everything a deployment needs to reach one network

    confirmation_timeout of None means wait for the receipt indefinitely.
    """
    name: str
    rpc_url: str
    private_keys: Tuple[str, ...] = field(repr=False)
    chain_id: Optional[int] = None
    artifacts_dir: str = "artifacts"
    request_timeout: float = 30
    confirmation_timeout: Optional[float] = None
    poll_latency: float = 1.0

    @property
    def receipt_timeout(self) -> float:
        """Timeout value to hand to web3's receipt polling"""
        if self.confirmation_timeout is None:
            return math.inf
        return self.confirmation_timeout


def _read_config_file(config_path: Union[str, Path]) -> Dict:
    path = Path(config_path)

    if not path.exists():
        raise ConfigurationError(f"Network config not found: {path}")

    try:
        with open(path, 'r', encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Network config at {path} is not valid JSON") from e


def load_network_config(
    network: Optional[str] = None,
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    env: Optional[Mapping[str, str]] = None
) -> NetworkConfig:
    """
    Load the configuration of one network

    Args:
        network: Network name (None = default_network from the config file)
        config_path: Path to networks.json
        env: Environment mapping (None = process environment)

    Returns:
        NetworkConfig with RPC URL and signer keys resolved
    """
    if env is None:
        env = os.environ

    config = _read_config_file(config_path)
    networks = config.get('networks') or {}

    name = network or config.get('default_network')
    if not name:
        raise ConfigurationError("No network given and no default_network configured")

    if name not in networks:
        known = ", ".join(sorted(networks)) or "none"
        raise ConfigurationError(f"Unknown network '{name}' (configured: {known})")

    net = networks[name]

    rpc_env = net.get('rpc_url_env', 'RPC_URL')
    rpc_url = env.get(rpc_env, "").strip()
    if not rpc_url:
        raise ConfigurationError(f"{rpc_env} must be set for network '{name}'")

    keys = []
    for key_env in net.get('accounts_env', []):
        key = env.get(key_env, "").strip()
        if not key:
            raise ConfigurationError(f"{key_env} must be set for network '{name}'")
        keys.append(key)

    if not keys:
        raise ConfigurationError(f"No accounts configured for network '{name}'")

    chain_id = net.get('chain_id')
    confirmation_timeout = net.get('confirmation_timeout_sec')

    # Relative artifacts_dir is resolved from the project root (parent of config/)
    artifacts_dir = Path(config.get('artifacts_dir', 'artifacts'))
    if not artifacts_dir.is_absolute():
        artifacts_dir = Path(config_path).resolve().parent.parent / artifacts_dir

    logger.debug(f"Loaded network '{name}' with {len(keys)} account(s)")

    return NetworkConfig(
        name=name,
        rpc_url=rpc_url,
        private_keys=tuple(keys),
        chain_id=int(chain_id) if chain_id is not None else None,
        artifacts_dir=str(artifacts_dir),
        request_timeout=float(net.get('request_timeout_sec', 30)),
        confirmation_timeout=float(confirmation_timeout) if confirmation_timeout is not None else None,
        poll_latency=float(net.get('poll_latency_sec', 1.0)),
    )


def require_address(env: Mapping[str, str], name: str) -> str:
    """
    Read a required address from the environment

    Args:
        env: Environment mapping
        name: Variable name, e.g. NODE_MANAGER_ADDRESS

    Returns:
        Checksummed address
    """
    value = env.get(name, "").strip()

    if not value:
        raise ConfigurationError(f"{name} must be set")

    if not Web3.is_address(value):
        raise ConfigurationError(f"{name} is not a valid address: {value}")

    return Web3.to_checksum_address(value)

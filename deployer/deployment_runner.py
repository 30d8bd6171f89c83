"""
Deployment Runner
Submits a single contract-creation transaction and reports its outcome
"""

from typing import Optional

from web3 import Web3
from loguru import logger

from blockchain.artifacts import ArtifactStore
from blockchain.exceptions import DeploymentFailure
from blockchain.network_config import NetworkConfig
from blockchain.signer import SignerRegistry

from .models import DeploymentRequest, DeploymentResult


class DeploymentRunner:
    """
    Deploys contracts from compiled artifacts on one configured network

    Exactly one transaction is submitted per deploy() call; nothing is
    retried and nothing is persisted locally.
    """

    def __init__(
        self,
        config: NetworkConfig,
        artifacts: Optional[ArtifactStore] = None,
        w3: Optional[Web3] = None
    ):
        """
        Initialize Deployment Runner

        Args:
            config: Network configuration (RPC endpoint, signer keys, timeouts)
            artifacts: Artifact store (None = config.artifacts_dir)
            w3: Web3 instance (None = HTTP provider on config.rpc_url)
        """
        self.config = config
        self.artifacts = artifacts or ArtifactStore(config.artifacts_dir)
        self.signers = SignerRegistry(config.private_keys)

        if w3 is None:
            w3 = Web3(Web3.HTTPProvider(
                config.rpc_url,
                request_kwargs={'timeout': config.request_timeout}
            ))
        self.w3 = w3

        logger.info(f"Deployment Runner initialized for network '{config.name}'")

    def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        """
        Deploy one contract and wait for confirmation

        Args:
            request: Contract name, constructor arguments and signer reference

        Returns:
            DeploymentResult for the confirmed transaction

        Raises:
            DeploymentFailure: on any error, wrapping the underlying cause
        """
        name = request.contract_name

        try:
            if not self.w3.is_connected():
                raise ConnectionError(f"Failed to connect to network '{self.config.name}'")

            artifact = self.artifacts.load(name)
            account = self.signers.resolve(request.signer)

            logger.info(f"Deploying {name} with the account: {account.address}")

            chain_id = self.config.chain_id
            if chain_id is None:
                chain_id = self.w3.eth.chain_id

            factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            transaction = factory.constructor(*request.constructor_args).build_transaction({
                'from': account.address,
                'nonce': self.w3.eth.get_transaction_count(account.address, 'pending'),
                'chainId': chain_id
            })

            signed_tx = account.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            tx_hash_hex = Web3.to_hex(tx_hash)

            logger.info(f"Transaction sent: {tx_hash_hex}")
            logger.info("Waiting for confirmation...")

            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.config.receipt_timeout,
                poll_latency=self.config.poll_latency
            )

            if receipt['status'] != 1:
                raise RuntimeError(f"Creation transaction {tx_hash_hex} reverted")

            contract_address = receipt['contractAddress']
            if not contract_address:
                raise RuntimeError(f"Receipt for {tx_hash_hex} has no contract address")

        except Exception as e:
            raise DeploymentFailure(name, e) from e

        result = DeploymentResult(
            contract_name=name,
            address=Web3.to_checksum_address(contract_address),
            tx_hash=tx_hash_hex,
            deployer=account.address,
            block_number=receipt.get('blockNumber'),
            gas_used=receipt.get('gasUsed'),
        )

        logger.success(f"{name} deployed at {result.address} (gas used: {result.gas_used})")
        return result

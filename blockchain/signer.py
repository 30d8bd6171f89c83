"""
Signer Registry
Resolves signer identity references to local eth-account accounts
"""

from typing import List, Optional, Sequence, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger

from .exceptions import ConfigurationError


class SignerRegistry:
    """
    Holds the accounts configured for a network

    A signer reference is either an index into the configured keys or the
    address of one of them.
    """

    def __init__(self, private_keys: Sequence[str]):
        """
        Initialize Signer Registry

        Args:
            private_keys: Hex private keys, in configuration order
        """
        self._private_keys = list(private_keys)
        self._accounts: List[Optional[LocalAccount]] = [None] * len(self._private_keys)

    def __len__(self) -> int:
        return len(self._private_keys)

    def _account(self, index: int) -> LocalAccount:
        if self._accounts[index] is None:
            try:
                self._accounts[index] = Account.from_key(self._private_keys[index])
            except Exception as e:
                # Do not echo the key itself
                raise ConfigurationError(f"Account #{index} has an invalid private key") from e
        return self._accounts[index]

    @property
    def addresses(self) -> List[str]:
        """Addresses of all configured accounts"""
        return [self._account(i).address for i in range(len(self))]

    def resolve(self, ref: Union[int, str] = 0) -> LocalAccount:
        """
        Resolve a signer reference

        Args:
            ref: Account index or address

        Returns:
            LocalAccount able to sign transactions
        """
        if isinstance(ref, bool):
            raise ConfigurationError(f"Invalid signer reference: {ref!r}")

        if isinstance(ref, int):
            if not 0 <= ref < len(self):
                raise ConfigurationError(
                    f"Signer index {ref} out of range ({len(self)} account(s) configured)"
                )
            account = self._account(ref)
            logger.debug(f"Resolved signer #{ref}: {account.address}")
            return account

        wanted = str(ref).lower()
        for i in range(len(self)):
            account = self._account(i)
            if account.address.lower() == wanted:
                return account

        raise ConfigurationError(f"No configured account with address {ref}")

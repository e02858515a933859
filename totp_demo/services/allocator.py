import logging
import secrets
import string
from typing import Optional

from totp_demo.core.config import settings
from totp_demo.registry import AccountRegistry

logger = logging.getLogger(__name__)

LETTERS = string.ascii_lowercase + string.ascii_uppercase


class AccountNameAllocator:
    def __init__(self, registry: AccountRegistry, prefix: str = settings.ACCOUNT_PREFIX, rng=None):
        self.registry = registry
        self.prefix = prefix
        self._rng = rng or secrets.SystemRandom()

    def _candidate(self, length: int) -> str:
        return self.prefix + "".join(self._rng.choice(LETTERS) for _ in range(length))

    def allocate(self, length: Optional[int] = None) -> str:
        """
        Returns a fresh `account-<letters>` name, already reserved in the registry.

        The registry lock is held across the whole generate/check/reserve loop,
        so two concurrent callers can never leave with the same name. The caller
        must either insert a record under the name or release it.
        """
        if length is None:
            length = settings.ACCOUNT_NAME_LENGTH
        if length <= 0:
            raise ValueError(f"account name length must be positive, got {length}")

        attempts = 0
        with self.registry.exclusive():
            while True:
                attempts += 1
                candidate = self._candidate(length)
                if self.registry.reserve(candidate):
                    break

        if attempts > 1:
            logger.info(f"Allocated {candidate} after {attempts} attempts")
        return candidate

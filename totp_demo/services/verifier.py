import logging
from enum import Enum

from totp_demo.core.config import settings
from totp_demo.registry import AccountRegistry
from totp_demo.services import totp

logger = logging.getLogger(__name__)


class VerificationResult(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    ACCOUNT_NOT_FOUND = "account_not_found"


class VerificationEngine:
    """
    Checks a submitted code against the secret stored for an account.

    Every call is a single, stateless evaluation against one point in time;
    clock drift is tolerated only through `valid_window`.
    """

    def __init__(self, registry: AccountRegistry, validate=totp.verify_code, valid_window: int = None):
        self.registry = registry
        self._validate = validate
        self.valid_window = settings.VALID_WINDOW if valid_window is None else valid_window

    def verify(self, identifier: str, submitted_code: str, for_time=None) -> VerificationResult:
        record, found = self.registry.lookup(identifier)
        if not found:
            logger.warning(f"Verify failed: account={identifier} not found")
            return VerificationResult.ACCOUNT_NOT_FOUND

        if self._validate(record.secret, submitted_code, for_time=for_time, valid_window=self.valid_window):
            logger.info(f"Verify success: account={identifier}")
            return VerificationResult.ACCEPTED

        logger.warning(f"Verify failed: account={identifier} code rejected")
        return VerificationResult.REJECTED

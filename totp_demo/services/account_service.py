import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from totp_demo.core.config import settings
from totp_demo.errors import GenerationError, RenderError
from totp_demo.registry import AccountRecord, AccountRegistry
from totp_demo.services.allocator import AccountNameAllocator
from totp_demo.services.logger import log_event
from totp_demo.services.provisioner import SecretProvisioner
from totp_demo.services.verifier import VerificationEngine, VerificationResult

"""AccountService: provisioning and verification flows over a shared AccountRegistry"""


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProvisionedAccount:
    identifier: str
    uri: str = field(repr=False)
    image: bytes = field(repr=False)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class AccountService:
    def __init__(
        self,
        registry: Optional[AccountRegistry] = None,
        allocator: Optional[AccountNameAllocator] = None,
        provisioner: Optional[SecretProvisioner] = None,
        verifier: Optional[VerificationEngine] = None,
        issuer: str = settings.ISSUER,
    ):
        self.registry = registry if registry is not None else AccountRegistry()
        self.allocator = allocator or AccountNameAllocator(self.registry)
        self.provisioner = provisioner or SecretProvisioner()
        self.verifier = verifier or VerificationEngine(self.registry)
        self.issuer = issuer

    def provision_account(self, width: Optional[int] = None, height: Optional[int] = None) -> ProvisionedAccount:
        """
        Creates a new account and returns its enrollment URI and QR image.

        The name is reserved under the registry lock; secret issuance and QR
        rendering happen outside it and only the final insert is guarded.
        On any failure before the insert the reservation is dropped, so the
        registry is left exactly as it was.
        """
        width = settings.QR_WIDTH if width is None else width
        height = settings.QR_HEIGHT if height is None else height

        started = time.perf_counter()
        identifier = self.allocator.allocate()
        try:
            enrollment = self.provisioner.provision(self.issuer, identifier)
            image = self.provisioner.render_image(enrollment.uri, width, height)
            record = AccountRecord(
                identifier=identifier,
                secret=enrollment.secret,
                issuer=self.issuer,
                provisioning_uri=enrollment.uri,
            )
            self.registry.insert(identifier, record)
        except GenerationError as e:
            self.registry.release(identifier)
            logger.error(f"Provision failed: account={identifier} generation error: {e}")
            log_event("provision", identifier, "generation_error", _elapsed_ms(started))
            raise
        except RenderError as e:
            self.registry.release(identifier)
            logger.error(f"Provision failed: account={identifier} render error: {e}")
            log_event("provision", identifier, "render_error", _elapsed_ms(started))
            raise
        except Exception:
            self.registry.release(identifier)
            logger.exception(f"Provision failed: account={identifier} unexpected error")
            log_event("provision", identifier, "error", _elapsed_ms(started))
            raise

        logger.info(f"Account provisioned: account={identifier}, issuer={self.issuer}")
        log_event("provision", identifier, "ok", _elapsed_ms(started))
        return ProvisionedAccount(identifier=identifier, uri=enrollment.uri, image=image)

    def verify(self, identifier: str, code: str) -> VerificationResult:
        started = time.perf_counter()
        result = self.verifier.verify(identifier, code)
        log_event("verify", identifier, result.value, _elapsed_ms(started))
        return result

    def list_accounts(self) -> List[str]:
        return self.registry.identifiers()

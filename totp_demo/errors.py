# Exceptions raised by the account registry and the provisioning flow.


class TOTPDemoError(Exception):
    """Base class for errors raised by this service."""


class GenerationError(TOTPDemoError):
    """The TOTP secret or enrollment URI could not be issued."""


class RenderError(TOTPDemoError):
    """The enrollment URI could not be rendered as a QR image."""


class DuplicateAccountError(TOTPDemoError):
    """An insert targeted an identifier that is already provisioned."""

    def __init__(self, identifier: str):
        super().__init__(f"account already exists: {identifier}")
        self.identifier = identifier

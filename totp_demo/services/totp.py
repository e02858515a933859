"""
TOTP primitives (RFC 6238) backed by pyotp.

Everything else in the service treats these functions as a black box.
"""
import pyotp


def issue_secret() -> str:
    """Generate a random TOTP secret in Base32 format."""
    return pyotp.random_base32()


def provisioning_uri(secret: str, label: str, issuer: str) -> str:
    """Build the otpauth:// URI an authenticator app scans."""
    return pyotp.TOTP(secret).provisioning_uri(name=label, issuer_name=issuer)


def derive_code(secret: str, for_time=None) -> str:
    """
    Derive the code for the time step containing `for_time`.

    Args:
        secret: Base32 TOTP secret
        for_time: Unix timestamp or datetime, defaults to now

    Returns:
        6-digit code as a string
    """
    totp = pyotp.TOTP(secret)
    if for_time is None:
        return totp.now()
    return totp.at(for_time)


def verify_code(secret: str, code: str, for_time=None, valid_window: int = 1) -> bool:
    """
    Check a submitted code against the secret.

    Args:
        secret: Base32 TOTP secret
        code: Code typed by the user
        for_time: Unix timestamp or datetime, defaults to now
        valid_window: Steps tolerated either side of `for_time` for clock drift

    Returns:
        True if the code matches one of the tolerated steps
    """
    return pyotp.TOTP(secret).verify(code, for_time=for_time, valid_window=valid_window)

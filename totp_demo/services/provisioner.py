import io
from dataclasses import dataclass, field

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from totp_demo.errors import GenerationError, RenderError
from totp_demo.services import totp


@dataclass(frozen=True)
class Enrollment:
    secret: str = field(repr=False)
    uri: str = field(repr=False)


class SecretProvisioner:
    """Issues TOTP secrets and renders their enrollment URIs as QR codes. Stateless."""

    @staticmethod
    def provision(issuer: str, account_label: str) -> Enrollment:
        """
        Issues a new secret for `account_label` and builds its otpauth:// URI.
        Raises GenerationError if the issuer or label cannot go into a URI.
        """
        if not issuer:
            raise GenerationError("issuer must not be empty")
        if not account_label:
            raise GenerationError("account label must not be empty")

        # ':' separates issuer and account in the URI label
        if ":" in issuer or ":" in account_label:
            raise GenerationError("issuer and account label must not contain ':'")

        try:
            secret = totp.issue_secret()
            uri = totp.provisioning_uri(secret, account_label, issuer)
        except ValueError as e:
            raise GenerationError(f"could not issue TOTP key: {e}") from e

        return Enrollment(secret=secret, uri=uri)

    @staticmethod
    def render_image(uri: str, width: int, height: int) -> bytes:
        """
        Creates a QR code of `uri` scaled to width x height and returns PNG bytes
        """
        if width <= 0 or height <= 0:
            raise RenderError(f"invalid image size {width}x{height}")

        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=4,
        )
        try:
            qr.add_data(uri)
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            # qrcode 8 reports overflow as an invalid version 41
            raise RenderError(f"payload of {len(uri)} characters does not fit in a QR code") from e

        img = qr.make_image(fill_color="black", back_color="white").get_image()
        img = img.resize((width, height), Image.Resampling.NEAREST)

        buffered = io.BytesIO()
        img.save(buffered, format="PNG")
        return buffered.getvalue()

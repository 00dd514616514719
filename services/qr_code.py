"""QR code generation for submitted registrations."""

from __future__ import annotations
import base64
import json
from io import BytesIO
from typing import Any, Dict

import qrcode


def encode_submission(submitted: Dict[str, Any]) -> str:
    """Compact JSON text carried by the QR code."""
    return json.dumps(submitted, ensure_ascii=False, separators=(",", ":"), default=str)


def make_qr_png(submitted: Dict[str, Any], box_size: int = 8, border: int = 2) -> bytes:
    """Render the submission as a PNG QR code."""
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(encode_submission(submitted))
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")

    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    """Embed PNG bytes as a data URL (for the HTML receipt)."""
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")

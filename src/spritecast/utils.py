"""Payload helpers shared by the pipeline, renderer and CLI."""

from __future__ import annotations

import base64
import binascii
import io

from PIL import Image

from spritecast.errors import DecodeError


def payload_to_bytes(payload: bytes | bytearray | str) -> bytes:
    """Normalize an image payload to raw encoded bytes.

    Accepts raw bytes, a base64 string, or a ``data:<mime>;base64,`` URL.

    Raises:
        DecodeError: If a string payload is not valid base64.
    """
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    if not isinstance(payload, str):
        raise DecodeError(f"Unsupported image payload type: {type(payload).__name__}")

    text = payload.strip()
    if text.startswith("data:"):
        header, sep, text = text.partition(",")
        if not sep or ";base64" not in header:
            raise DecodeError("Data URL payload must be base64-encoded")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 image payload: {exc}") from exc


def image_to_base64(image: Image.Image | bytes) -> str:
    """Convert a PIL Image (saved as PNG) or raw bytes to base64 text."""
    if isinstance(image, Image.Image):
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        raw = buf.getvalue()
    else:
        raw = image
    return base64.b64encode(raw).decode("ascii")


def image_to_data_url(image: Image.Image | bytes, media_type: str = "image/png") -> str:
    """Return ``data:{media_type};base64,{encoded}`` for *image*."""
    return f"data:{media_type};base64,{image_to_base64(image)}"

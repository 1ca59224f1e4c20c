"""
Kernel Component: Encoding Converter

Byte content to/from text over a closed encoding set.

Encodings (frozen):
  - hex: lowercase, two characters per byte, no separators, no prefix
  - base64 / base64url: padded, standard or URL-safe alphabet
  - latin1 (binary): byte value == code point
  - utf8 (utf-8): pass-through, malformed input is not rejected
  - utf16le (utf-16le): byte pairs as little-endian code units
"""

import base64
import binascii
from typing import Optional

from ..core.errors import InvalidArgument
from ..core.registry import ENCODINGS


def resolve_encoding(encoding: Optional[str]) -> str:
    """
    Map an encoding selector (or alias) to its canonical name.

    None selects utf8.

    Raises:
        InvalidArgument: If the selector is not in the closed set.
    """
    if encoding is None:
        return "utf8"
    canonical = ENCODINGS.get(encoding) if isinstance(encoding, str) else None
    if canonical is None:
        raise InvalidArgument(f'Invalid or unknown text encoding "{encoding}"')
    return canonical


def to_hex(data) -> str:
    """Lowercase hex of `data`, exactly two characters per byte."""
    return bytes(data).hex()


def to_string(data, encoding: Optional[str] = "utf8") -> str:
    """
    Render bytes as text in the requested encoding.

    Args:
        data: Bytes-like content.
        encoding: Selector from the closed set (aliases accepted).

    Returns:
        str: Text representation.

    Raises:
        InvalidArgument: If the encoding selector is unknown.
    """
    enc = resolve_encoding(encoding)
    raw = bytes(data)

    if enc == "hex":
        return raw.hex()
    if enc == "base64":
        return base64.b64encode(raw).decode("ascii")
    if enc == "base64url":
        return base64.urlsafe_b64encode(raw).decode("ascii")
    if enc == "latin1":
        return raw.decode("latin-1")
    if enc == "utf8":
        return raw.decode("utf-8", errors="replace")

    # utf16le: a trailing odd byte has no partner and is dropped
    usable = len(raw) - (len(raw) % 2)
    return raw[:usable].decode("utf-16-le", errors="surrogatepass")


def from_string(text: str, encoding: Optional[str] = "utf8") -> bytes:
    """
    Decode text in the requested encoding back to bytes.

    Raises:
        InvalidArgument: On an unknown selector or text that is not valid
            for the encoding (odd-length or spaced hex, characters outside
            the base64/base64url alphabet, latin1 > U+00FF).
    """
    enc = resolve_encoding(encoding)
    if not isinstance(text, str):
        raise InvalidArgument(f"text must be str, got {type(text).__name__}")

    # fromhex() skips whitespace; hex text here is unseparated
    if enc == "hex" and any(c.isspace() for c in text):
        raise InvalidArgument("Cannot decode text as hex: whitespace in input")

    try:
        if enc == "hex":
            return bytes.fromhex(text)
        if enc == "base64":
            return base64.b64decode(text, validate=True)
        if enc == "base64url":
            return base64.b64decode(text, altchars=b"-_", validate=True)
        if enc == "latin1":
            return text.encode("latin-1")
        if enc == "utf8":
            return text.encode("utf-8", errors="surrogatepass")
        return text.encode("utf-16-le", errors="surrogatepass")
    except (ValueError, binascii.Error) as e:
        raise InvalidArgument(f"Cannot decode text as {enc}: {e}") from e

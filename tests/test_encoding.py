"""
Encoding Converter - Unit Tests

Verifies:
  - to_hex() is lowercase, two digits per byte, no separators
  - to_string() over the closed set (hex, base64, base64url, latin1, utf8, utf16le)
  - Unknown selectors raise InvalidArgument
  - from_string() inverse direction and its failure modes
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bytesuite import ByteBuffer, InvalidArgument
from bytesuite.kernel import to_hex, to_string, from_string, resolve_encoding


def test_to_hex_canonical():
    """Every byte value renders as exactly two lowercase hex digits."""
    data = bytes(range(256))
    hx = ByteBuffer.from_bytes(data).to_hex()

    assert len(hx) == 512
    assert hx == "".join(f"{b:02x}" for b in data)
    assert hx == hx.lower()


def test_to_hex_empty():
    assert ByteBuffer.alloc().to_hex() == ""
    assert to_hex(b"") == ""


@pytest.mark.parametrize("encoding,expected", [
    ("hex", "00ff10"),
    ("base64", "AP8Q"),
    ("latin1", "\x00\xff\x10"),
    ("binary", "\x00\xff\x10"),
])
def test_to_string_binary_encodings(encoding, expected):
    assert to_string(b"\x00\xff\x10", encoding) == expected


def test_base64_padding_and_urlsafe():
    assert to_string(b"\xfb\xff", "base64") == "+/8="
    assert to_string(b"\xfb\xff", "base64url") == "-_8="
    assert to_string(b"a", "base64") == "YQ=="


def test_utf8_pass_through():
    text = "héllo ✓"
    buf = ByteBuffer.from_bytes(text.encode("utf-8"))
    assert buf.to_string("utf8") == text
    assert buf.to_string("utf-8") == text
    assert buf.to_string() == text
    assert buf.to_string(None) == text


def test_utf8_malformed_not_rejected():
    """Well-formedness is not enforced; bad sequences decode to replacements."""
    assert to_string(b"ok\xff", "utf8") == "ok�"


def test_utf16le_code_units():
    """Byte pairs are little-endian 16-bit units; a trailing odd byte is dropped."""
    assert to_string(b"h\x00i\x00", "utf16le") == "hi"
    assert to_string(b"\x3d\xd8\x00\xde", "utf-16le") == "\U0001f600"
    assert to_string(b"h\x00i", "utf16le") == "h"


@pytest.mark.parametrize("selector", ["ascii", "UTF8", "", "ucs2", 7])
def test_unknown_encoding(selector):
    with pytest.raises(InvalidArgument):
        to_string(b"abc", selector)


def test_resolve_encoding_aliases():
    assert resolve_encoding("binary") == "latin1"
    assert resolve_encoding("utf-16le") == "utf16le"
    assert resolve_encoding(None) == "utf8"


# ═══════════════════════════════════════════════════════════════════════
# from_string()
# ═══════════════════════════════════════════════════════════════════════

def test_from_string_each_encoding():
    assert from_string("DEadbeef", "hex") == b"\xde\xad\xbe\xef"
    assert from_string("AP8Q", "base64") == b"\x00\xff\x10"
    assert from_string("-_8=", "base64url") == b"\xfb\xff"
    assert from_string("\xe9", "latin1") == b"\xe9"
    assert from_string("é", "utf8") == b"\xc3\xa9"
    assert from_string("hi", "utf16le") == b"h\x00i\x00"


def test_from_string_invalid_text():
    with pytest.raises(InvalidArgument):
        from_string("abc", "hex")
    with pytest.raises(InvalidArgument):
        from_string("zz", "hex")
    with pytest.raises(InvalidArgument):
        from_string("@@@@", "base64")
    with pytest.raises(InvalidArgument):
        from_string("Ā", "latin1")
    with pytest.raises(InvalidArgument):
        from_string(b"raw", "utf8")


@pytest.mark.parametrize("text", ["01 02", " 0102", "0102\n", "01\t02"])
def test_from_string_hex_rejects_whitespace(text):
    """Hex text is unseparated; embedded or surrounding whitespace is malformed."""
    with pytest.raises(InvalidArgument):
        ByteBuffer.from_string(text, "hex")


@pytest.mark.parametrize("text", ["@@@@", "-_8=!", "AP8Q*"])
def test_from_string_base64url_rejects_foreign_characters(text):
    """Characters outside the URL-safe alphabet are rejected, not skipped."""
    with pytest.raises(InvalidArgument):
        ByteBuffer.from_string(text, "base64url")


def test_buffer_from_string():
    buf = ByteBuffer.from_string("0a141e", "hex")
    assert list(buf) == [10, 20, 30]
    assert buf.to_string("base64") == "ChQe"
    assert ByteBuffer.from_string("").length == 0

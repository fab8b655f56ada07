"""Encoding: bytes -> charset symbols.

The payload is consumed three bytes at a time. Each byte triple is packed
into 24 bits and split into four 6-bit indices, most significant first,
which are then mapped through the charset:

    combined = b0 << 16 | b1 << 8 | b2
    indices  = combined >> 18, combined >> 12 & 63, combined >> 6 & 63, combined & 63

A final group of one or two bytes is right-aligned: the missing bytes are
zero-filled at the *front* of the group, so it is packed as (0, 0, b0) or
(0, b0, b1). The symbols covering only absent bytes are always index 0,
which makes charset[0] the pad symbol. The decoder sees a complete quad
and its zero-byte filter strips the fill again.

Left-aligned padding (as in RFC 4648 base64) would not survive the
decoder: it drops groups that are short of four symbols.

Output length: 4 * ceil(n / 3) characters for n input bytes.
  3 bytes -> 4 chars
  4 bytes -> 8 chars
"""

import logging

from bincodec.charset import validate_for_encoding

logger = logging.getLogger(__name__)

GROUP_BYTES = 3


def _quad(charset: str, combined: int) -> str:
    return (
        charset[(combined >> 18) & 0x3F]
        + charset[(combined >> 12) & 0x3F]
        + charset[(combined >> 6) & 0x3F]
        + charset[combined & 0x3F]
    )


def encode_with(charset: str, payload: bytes) -> str:
    """Encode payload without validating charset first."""
    result = []
    n = len(payload)
    full = n - n % GROUP_BYTES
    for i in range(0, full, GROUP_BYTES):
        combined = (payload[i] << 16) | (payload[i + 1] << 8) | payload[i + 2]
        result.append(_quad(charset, combined))
    if full < n:
        # right-align the tail; leading fill becomes charset[0]
        combined = int.from_bytes(payload[full:], "big")
        result.append(_quad(charset, combined))
    logger.debug("encoded %d byte(s) into %d group(s)", n, len(result))
    return "".join(result)


def encode(charset: str, payload: bytes | str) -> str:
    """Encode payload with charset.

    A str payload is UTF-8 encoded first. Raises CharsetError if charset
    repeats a character or has fewer than 64 characters.
    """
    validate_for_encoding(charset)
    if isinstance(payload, str):
        payload = payload.encode()
    return encode_with(charset, payload)

"""Decoding: charset symbols -> bytes -> text.

Each character of the input is looked up in the charset. Characters that
are not in the charset (whitespace, line breaks, a foreign pad character)
contribute nothing and are skipped. The resulting indices are consumed
four at a time:

    combined = i0 << 18 | i1 << 12 | i2 << 6 | i3
    bytes    = combined >> 16 & 0xFF, combined >> 8 & 0xFF, combined & 0xFF

Two kinds of loss are part of the format and happen silently by default:

- indices left over at the end that never complete a group are discarded;
- every zero byte is removed from the output, wherever it occurs. This is
  how the encoder's right-aligned final group loses its zero fill, but it
  also deletes genuine zero bytes from the payload.

Finally the bytes are read as UTF-8; if they are not valid UTF-8 the result
is the empty string.

With strict=True both kinds of loss raise a DecodeError instead. Zero
bytes are still allowed as the leading run of the final group, since that
is exactly what the encoder writes for a short payload tail.
"""

import logging
from collections.abc import Mapping

from bincodec.charset import index_map, validate
from bincodec.errors import TextDecodeError, TruncatedInputError, ZeroByteError

logger = logging.getLogger(__name__)

GROUP_SYMBOLS = 4
GROUP_BYTES = 3


def _unpack(lookup: Mapping[str, int], text: str) -> tuple[bytearray, int]:
    """Collect indices and unpack every complete quad.

    Returns the raw bytes (zeros included) and the number of indices left
    over in the buffer at the end.
    """
    out = bytearray()
    buf: list[int] = []
    for ch in text:
        idx = lookup.get(ch)
        if idx is None:
            continue
        # indices are stored as single bytes, so charsets past 256 symbols wrap
        buf.append(idx & 0xFF)
        if len(buf) == GROUP_SYMBOLS:
            combined = (buf[0] << 18) | (buf[1] << 12) | (buf[2] << 6) | buf[3]
            out.append((combined >> 16) & 0xFF)
            out.append((combined >> 8) & 0xFF)
            out.append(combined & 0xFF)
            buf.clear()
    return out, len(buf)


def _check_zeros(raw: bytearray) -> None:
    """Raise ZeroByteError for any zero byte that is not final-group fill."""
    tail = len(raw) - GROUP_BYTES
    fill_end = tail
    # at most two fill bytes: an all-zero final group is payload, not padding
    while 0 <= fill_end < len(raw) - 1 and raw[fill_end] == 0:
        fill_end += 1
    for offset, b in enumerate(raw):
        if b == 0 and not tail <= offset < fill_end:
            raise ZeroByteError(offset)


def decode_with(lookup: Mapping[str, int], text: str, strict: bool = False) -> bytes:
    """Decode text using a prebuilt character -> index lookup.

    No charset validation happens here; callers are expected to have
    validated the charset the lookup was built from.
    """
    raw, leftover = _unpack(lookup, text)
    if leftover:
        if strict:
            raise TruncatedInputError(leftover)
        logger.debug("discarding %d index(es) of an incomplete trailing group", leftover)
    if strict:
        _check_zeros(raw)
    data = bytes(b for b in raw if b != 0)
    logger.debug(
        "decoded %d group(s), dropped %d zero byte(s)",
        len(raw) // GROUP_BYTES,
        len(raw) - len(data),
    )
    return data


def to_text(data: bytes, strict: bool = False) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        if strict:
            raise TextDecodeError(f"decoded bytes are not valid UTF-8: {e}") from e
        logger.debug("decoded bytes are not valid UTF-8, returning empty string")
        return ""


def decode_bytes(charset: str, text: str, *, strict: bool = False) -> bytes:
    """Decode text to bytes, without the final UTF-8 step."""
    validate(charset)
    return decode_with(index_map(charset), text, strict)


def decode(charset: str, text: str, *, strict: bool = False) -> str:
    """Decode text that was encoded with charset.

    Raises CharsetError if charset repeats a character. Otherwise the
    lenient default never fails: malformed or truncated input degrades to
    a shorter or empty string.
    """
    return to_text(decode_bytes(charset, text, strict=strict), strict)

"""Charset validation.

A charset is an ordered string of symbols: position in the string is the
symbol's numeric index. Decoding looks characters up by position, so a
charset is only usable if every character occurs once. A repeated character
would make the lookup ambiguous (the first position wins) and break the
one-to-one mapping between symbol and index that a round trip relies on.

Encoding has one more requirement: each group is split into four 6-bit
indices, so all 64 values in [0, 64) need a symbol. Characters past
position 63 are legal but never produced by the encoder. Decoded indices
are kept as single bytes, so in a charset longer than 256 characters
position 256 reads as 0, 257 as 1, and so on.
"""

import logging

from bincodec.errors import CharsetError

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_="
BITS_PER_SYMBOL = 6
MIN_ENCODE_CHARSET = 1 << BITS_PER_SYMBOL  # 64


def is_safe(charset: str) -> bool:
    """True if no character appears more than once in charset."""
    return len(set(charset)) == len(charset)


def _first_duplicate(charset: str) -> str | None:
    seen: set[str] = set()
    for ch in charset:
        if ch in seen:
            return ch
        seen.add(ch)
    return None


def validate(charset: str) -> None:
    """Raise CharsetError unless charset is safe to decode with."""
    dup = _first_duplicate(charset)
    if dup is not None:
        logger.debug("rejecting charset of length %d: %r repeated", len(charset), dup)
        raise CharsetError(f"duplicate character in charset: {dup!r}")


def validate_for_encoding(charset: str) -> None:
    """Like validate(), but also require a symbol for every 6-bit index."""
    validate(charset)
    if len(charset) < MIN_ENCODE_CHARSET:
        logger.debug("rejecting charset of length %d for encoding", len(charset))
        raise CharsetError(
            f"charset has {len(charset)} characters, encoding needs at least {MIN_ENCODE_CHARSET}"
        )


def index_map(charset: str) -> dict[str, int]:
    """Character -> index lookup for charset.

    Equivalent to scanning charset for each character: if a character
    were repeated, its first position would win. Validated charsets have
    no repeats, so this only matters for callers that skip validation.
    """
    lookup: dict[str, int] = {}
    for i, ch in enumerate(charset):
        lookup.setdefault(ch, i)
    return lookup

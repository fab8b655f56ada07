"""A codec bound to one charset.

The free functions in bincodec.encoder and bincodec.decoder validate the
charset on every call. Codec does it once, keeps the reverse lookup, and
can be shared freely: nothing on it changes after construction.
"""

from collections.abc import Mapping
from types import MappingProxyType

from bincodec.charset import MIN_ENCODE_CHARSET, index_map, validate, validate_for_encoding
from bincodec.decoder import decode_with, to_text
from bincodec.encoder import encode_with


class Codec:
    """Encode and decode with a fixed charset.

    Construction raises CharsetError for a charset with repeated characters.
    A charset shorter than 64 characters can still decode; encode() raises
    CharsetError for it (see can_encode).
    """

    __slots__ = ("_charset", "_lookup")

    def __init__(self, charset: str):
        validate(charset)
        self._charset = charset
        self._lookup = MappingProxyType(index_map(charset))

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def lookup(self) -> Mapping[str, int]:
        return self._lookup

    def __repr__(self) -> str:
        return f"Codec({self.charset!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Codec):
            return NotImplemented
        return self.charset == other.charset

    def __hash__(self) -> int:
        return hash(self.charset)

    @property
    def can_encode(self) -> bool:
        return len(self.charset) >= MIN_ENCODE_CHARSET

    def encode(self, payload: bytes | str) -> str:
        validate_for_encoding(self.charset)
        if isinstance(payload, str):
            payload = payload.encode()
        return encode_with(self.charset, payload)

    def decode_bytes(self, text: str, *, strict: bool = False) -> bytes:
        return decode_with(self.lookup, text, strict)

    def decode(self, text: str, *, strict: bool = False) -> str:
        return to_text(decode_with(self.lookup, text, strict), strict)

"""bincodec: binary-to-text encoding with a pluggable 64-symbol charset."""

from bincodec.charset import DEFAULT_CHARSET, index_map, is_safe, validate, validate_for_encoding
from bincodec.codec import Codec
from bincodec.decoder import decode, decode_bytes
from bincodec.encoder import encode
from bincodec.errors import (
    CharsetError,
    CodecError,
    DecodeError,
    TextDecodeError,
    TruncatedInputError,
    ZeroByteError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CHARSET",
    "Codec",
    "encode",
    "decode",
    "decode_bytes",
    "is_safe",
    "validate",
    "validate_for_encoding",
    "index_map",
    "CodecError",
    "CharsetError",
    "DecodeError",
    "TruncatedInputError",
    "ZeroByteError",
    "TextDecodeError",
]

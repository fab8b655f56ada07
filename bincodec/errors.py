"""Exceptions raised by bincodec.

Everything derives from ValueError, so code that already guards a decode
call with ``except ValueError`` keeps working.

    CodecError
    ├── CharsetError          duplicate characters, or too short to encode
    └── DecodeError           strict-mode decode failures
        ├── TruncatedInputError
        ├── ZeroByteError
        └── TextDecodeError
"""


class CodecError(ValueError):
    pass


class CharsetError(CodecError):
    pass


class DecodeError(CodecError):
    pass


class TruncatedInputError(DecodeError):
    """Leftover indices at the end of the text did not fill a group."""

    def __init__(self, leftover: int):
        self.leftover = leftover
        super().__init__(f"incomplete trailing group: {leftover} symbol(s) left over")


class ZeroByteError(DecodeError):
    """A zero byte outside the final group's padding would be dropped."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"zero byte at offset {offset} would be dropped")


class TextDecodeError(DecodeError):
    pass

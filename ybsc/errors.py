"""Exceptions raised while decoding a YBSC binary catalogue."""

from __future__ import annotations


class YbscError(ValueError):
    exit_code = 2


class TruncatedInputError(YbscError, EOFError):
    exit_code = 3

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"unexpected end of input: wanted {expected} byte(s), got {received}")
        self.expected = expected
        self.received = received


class InvalidCharError(YbscError):
    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid char {value}")
        self.value = value


class BadEntrySizeError(YbscError):
    exit_code = 4

    def __init__(self, nbent: int) -> None:
        super().__init__(f"Number of bytes per entry {nbent} is not 32")
        self.nbent = nbent


class InvalidStnumError(YbscError):
    exit_code = 4

    def __init__(self, stnum: int) -> None:
        super().__init__(f"Invalid stnum value {stnum}")
        self.stnum = stnum


class InvalidStarNumberError(YbscError):
    def __init__(self, value: float) -> None:
        super().__init__(f"Invalid star number {value}")
        self.value = value

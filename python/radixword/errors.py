"""Error kinds raised by radixword.

Both errors are contract violations detected at construction or
validation time. They derive from ValueError so callers that already
handle bad input generically keep working.
"""

from typing import Optional


class AlphabetError(ValueError):
    """Base class for alphabet and word errors."""


class DuplicateSymbolError(AlphabetError):
    """An alphabet was built from symbols containing a repeat."""

    def __init__(self, symbol: str, index: int):
        self.symbol = symbol
        self.index = index
        super().__init__(
            f"Illegal alphabet. Duplicate character {symbol!r} at index {index}"
        )


class InvalidWordError(AlphabetError):
    """A word contains characters outside the target alphabet."""

    def __init__(
        self,
        word: Optional[str],
        offending: Optional[list[str]] = None,
        message: Optional[str] = None,
    ):
        self.word = word
        self.offending = list(offending or [])
        if message is None:
            message = (
                f"Word {word!r} is invalid against this alphabet. "
                f"Offending characters are: {self.offending!r}"
            )
        super().__init__(message)

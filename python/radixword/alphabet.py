"""Alphabets and positional conversion between integers and words.

An Alphabet is an ordered, duplicate-free set of symbols. The index of a
symbol is its digit value and the symbol count is the radix, so an
alphabet defines a base-N numeral system over arbitrary characters.

Example:
    binary = Alphabet("01")
    binary.parse_long(5)                    → Word "101"
    binary.to_long(binary.create_word("101")) → 5
"""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from .errors import DuplicateSymbolError, InvalidWordError
from .word import Word

logger = logging.getLogger(__name__)

# One past the highest Unicode code point
MAX_RADIX = 0x110000

LONG_MAX = 2**63 - 1
INT_MAX = 2**31 - 1


def identity_symbols(radix: int) -> str:
    """Build the identity symbol sequence for a radix.

    Args:
        radix: Number of symbols, 0 to MAX_RADIX.

    Returns:
        String of the code points 0..radix-1 in order.
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise TypeError(f"Radix must be an integer, got {radix!r}")
    if not 0 <= radix <= MAX_RADIX:
        raise ValueError(f"Radix must be between 0 and {MAX_RADIX}, got {radix}")
    return "".join(chr(code) for code in range(radix))


def _as_symbol_string(symbols: Iterable[str]) -> str:
    """Join a sequence of single characters into a symbol string."""
    if isinstance(symbols, str):
        return symbols
    chars = list(symbols)
    for item in chars:
        if not isinstance(item, str) or len(item) != 1:
            raise TypeError(f"Alphabet symbols must be single characters, got {item!r}")
    return "".join(chars)


def _build_digit_map(symbols: str) -> dict[str, int]:
    """Map each symbol to its index, rejecting repeats."""
    digits: dict[str, int] = {}
    for index, symbol in enumerate(symbols):
        if symbol in digits:
            raise DuplicateSymbolError(symbol, index)
        digits[symbol] = index
    return digits


def _to_signed32(value: int) -> int:
    """Truncate to a signed 32-bit integer (two's complement)."""
    value &= 0xFFFFFFFF
    if value > INT_MAX:
        value -= 1 << 32
    return value


class Alphabet:
    """An ordered, duplicate-free set of symbols defining a radix.

    Build one from a string of symbols, a sequence of single characters,
    or a radix (the identity alphabet of code points 0..radix-1).
    Subclasses may set `default_symbols` and be instantiated with no
    arguments.

    Alphabets are immutable. Two alphabets are equal when their symbol
    strings are equal.
    """

    default_symbols: Optional[str] = None

    def __init__(self, symbols: Union[str, Iterable[str], int, None] = None):
        """Initialize alphabet.

        Args:
            symbols: Symbol string, sequence of characters, or radix.
                Defaults to the class's `default_symbols`.

        Raises:
            DuplicateSymbolError: If a symbol occurs more than once.
        """
        if symbols is None:
            symbols = self.default_symbols
            if symbols is None:
                raise TypeError(f"{type(self).__name__} requires symbols or a radix")
        if isinstance(symbols, int):
            symbols = identity_symbols(symbols)
        else:
            symbols = _as_symbol_string(symbols)

        self._digits = _build_digit_map(symbols)
        self._symbols = symbols
        self._radix = len(symbols)
        logger.debug("Built %s with radix %d", type(self).__name__, self._radix)

    @classmethod
    def from_radix(cls, radix: int) -> "Alphabet":
        """Identity alphabet of code points 0..radix-1."""
        return cls(identity_symbols(radix))

    @classmethod
    def from_range(cls, first: str, last: str) -> "Alphabet":
        """Alphabet of the characters first..last inclusive.

        Args:
            first: Lowest character.
            last: Highest character.

        Returns:
            Alphabet ordered by code point.
        """
        if len(first) != 1 or len(last) != 1:
            raise TypeError("Range bounds must be single characters")
        if ord(last) < ord(first):
            raise ValueError(f"Empty character range {first!r}..{last!r}")
        return cls("".join(chr(code) for code in range(ord(first), ord(last) + 1)))

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def symbol_to_digit(self) -> Mapping[str, int]:
        return MappingProxyType(self._digits)

    @property
    def radix(self) -> int:
        return self._radix

    def digit(self, symbol: str) -> int:
        """Digit value of a symbol."""
        try:
            return self._digits[symbol]
        except KeyError:
            raise ValueError(f"{symbol!r} is not in this alphabet") from None

    def symbol(self, digit: int) -> str:
        """Symbol for a digit value."""
        if not 0 <= digit < self._radix:
            raise ValueError(f"Digit {digit} out of range for radix {self._radix}")
        return self._symbols[digit]

    def validate(self, word: Optional[str]) -> bool:
        """Check if every character of a word is in this alphabet.

        Args:
            word: Text to check, or None.

        Returns:
            False for None, otherwise True iff all characters are symbols.
            The empty string is valid.
        """
        if word is None:
            return False
        return all(char in self._digits for char in word)

    def offending_characters(self, word: Optional[str]) -> Optional[list[str]]:
        """Characters of a word that aren't part of this alphabet.

        Args:
            word: Text to check, or None.

        Returns:
            Offending characters in input order, one entry per occurrence,
            or None when word is None.
        """
        if word is None:
            return None
        return [char for char in word if char not in self._digits]

    def create_word(self, word: str) -> Word["Alphabet"]:
        """Create a validated Word in this alphabet.

        Raises:
            InvalidWordError: If word contains characters outside the alphabet.
        """
        return Word(word, self)

    def parse_long(self, value: int) -> Word["Alphabet"]:
        """Word representing a non-negative 64-bit integer."""
        return self._expand(value, LONG_MAX)

    def parse_int(self, value: int) -> Word["Alphabet"]:
        """Word representing a non-negative 32-bit integer."""
        return self._expand(value, INT_MAX)

    def _expand(self, value: int, limit: int) -> Word["Alphabet"]:
        """Positional expansion of value, most significant digit first."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Value must be an integer, got {value!r}")
        if not 0 <= value <= limit:
            raise ValueError(f"Value must be between 0 and {limit}, got {value}")
        if self._radix == 0:
            raise ValueError("An empty alphabet cannot represent integers")
        if self._radix == 1 and value:
            raise ValueError("A radix 1 alphabet can only represent 0")

        digits = []
        while True:
            value, digit = divmod(value, self._radix)
            digits.append(self._symbols[digit])
            if not value:
                break
        return Word._unchecked("".join(reversed(digits)), self)

    def to_long(self, word: Word["Alphabet"]) -> int:
        """Integer value of a word produced by or accepted into this alphabet.

        Raises:
            InvalidWordError: If the word belongs to a different alphabet.
            OverflowError: If the value doesn't fit in a signed 64-bit integer.
        """
        return self._evaluate(word)

    def to_int(self, word: Word["Alphabet"]) -> int:
        """Integer value of a word, truncated to a signed 32-bit integer."""
        return _to_signed32(self.to_long(word))

    def _evaluate(self, word: Word["Alphabet"]) -> int:
        if not isinstance(word, Word):
            raise TypeError(f"Expected a Word, got {type(word).__name__}")
        if word.alphabet != self:
            raise InvalidWordError(
                word.text,
                message=f"Word {word.text!r} belongs to a different alphabet",
            )

        # Most significant digit first; leading zero symbols keep value at 0
        value = 0
        for char in word.text:
            value = value * self._radix + self._digits[char]
            if value > LONG_MAX:
                shown = word.text if len(word.text) <= 40 else word.text[:40] + "..."
                raise OverflowError(f"Word {shown!r} exceeds the 64-bit range")
        return value

    def __len__(self) -> int:
        return self._radix

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._digits

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        if self._radix > 64:
            return f"<{type(self).__name__} radix={self._radix}>"
        return f"{type(self).__name__}({self._symbols!r})"

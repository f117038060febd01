"""Word values certified against an alphabet.

A Word couples a string to the Alphabet that validated (or produced) it,
so conversion routines only ever see text known to be valid.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from .errors import InvalidWordError

if TYPE_CHECKING:
    from .alphabet import Alphabet

A = TypeVar("A", bound="Alphabet")


@dataclass(frozen=True)
class Word(Generic[A]):
    """An immutable string whose characters all belong to `alphabet`.

    Equality and hashing compare both the text and the alphabet, so the
    same text accepted by two different alphabets gives unequal words.
    """

    text: str
    alphabet: A = field(repr=False)

    def __post_init__(self):
        """Validate text against the alphabet."""
        if self.text is None:
            raise InvalidWordError(None, message="Word text must be a string, not None")
        if not isinstance(self.text, str):
            raise TypeError(f"Word text must be a string, got {type(self.text).__name__}")
        offending = self.alphabet.offending_characters(self.text)
        if offending:
            raise InvalidWordError(self.text, offending)

    @classmethod
    def _unchecked(cls, text: str, alphabet: A) -> "Word[A]":
        """Wrap text already known to be valid. Internal to Alphabet."""
        word = object.__new__(cls)
        object.__setattr__(word, "text", text)
        object.__setattr__(word, "alphabet", alphabet)
        return word

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def to_long(self) -> int:
        """Integer value of this word in its alphabet."""
        return self.alphabet.to_long(self)

    def to_int(self) -> int:
        """Integer value of this word, truncated to 32 bits."""
        return self.alphabet.to_int(self)

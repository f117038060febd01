"""radixword - integers as words over arbitrary alphabets.

An alphabet is an ordered set of distinct symbols; its size is the radix
of a positional numeral system. radixword converts non-negative integers
to words in that system and back, and validates text against alphabets.

Core concepts:
    - Alphabet: the symbols and radix, plus all validation and conversion
    - Word: text certified valid by the alphabet that produced it
    - Presets: common alphabets (base2 .. base64url) by name

Usage:
    from radixword import Alphabet
    from radixword.presets import Base16

    binary = Alphabet("01")
    word = binary.parse_long(5)        # Word "101"
    binary.to_long(word)               # 5

    hex_word = Base16().create_word("ff")
    hex_word.to_long()                 # 255
"""

from .alphabet import Alphabet, identity_symbols
from .errors import AlphabetError, DuplicateSymbolError, InvalidWordError
from .word import Word

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "AlphabetError",
    "DuplicateSymbolError",
    "InvalidWordError",
    "Word",
    "identity_symbols",
]

"""Named preset alphabets.

Provides common numeral alphabets as Alphabet subclasses:
- base2, base8, base10, base16 (lowercase hex)
- base32 and base32hex (RFC 4648)
- base36, base58 (Bitcoin ordering), base62
- base64 and base64url (RFC 4648)

Usage:
    from radixword.presets import Base62, get_alphabet

    Base62().parse_long(125)       → Word "21"
    get_alphabet("base16").parse_long(255)  → Word "ff"
"""

from .alphabet import Alphabet

DIGITS = "0123456789"
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = LOWER.upper()


class Base2(Alphabet):
    default_symbols = "01"


class Base8(Alphabet):
    default_symbols = DIGITS[:8]


class Base10(Alphabet):
    default_symbols = DIGITS


class Base16(Alphabet):
    default_symbols = DIGITS + LOWER[:6]


class Base32(Alphabet):
    default_symbols = UPPER + "234567"


class Base32Hex(Alphabet):
    default_symbols = DIGITS + UPPER[:22]


class Base36(Alphabet):
    default_symbols = DIGITS + LOWER


class Base58(Alphabet):
    # No 0, O, I or l
    default_symbols = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


class Base62(Alphabet):
    default_symbols = DIGITS + UPPER + LOWER


class Base64(Alphabet):
    default_symbols = UPPER + LOWER + DIGITS + "+/"


class Base64Url(Alphabet):
    default_symbols = UPPER + LOWER + DIGITS + "-_"


# Register available alphabets
ALPHABETS: dict[str, type[Alphabet]] = {
    "base2": Base2,
    "base8": Base8,
    "base10": Base10,
    "base16": Base16,
    "base32": Base32,
    "base32hex": Base32Hex,
    "base36": Base36,
    "base58": Base58,
    "base62": Base62,
    "base64": Base64,
    "base64url": Base64Url,
}


def get_alphabet(name: str) -> Alphabet:
    """Instantiate a registered alphabet by name."""
    if name not in ALPHABETS:
        raise ValueError(f"Unknown alphabet: {name}. Available: {list(ALPHABETS.keys())}")
    return ALPHABETS[name]()


def register_alphabet(name: str, alphabet_cls: type[Alphabet]) -> None:
    """Register a custom alphabet class."""
    ALPHABETS[name] = alphabet_cls


__all__ = [
    "ALPHABETS",
    "Base2",
    "Base8",
    "Base10",
    "Base16",
    "Base32",
    "Base32Hex",
    "Base36",
    "Base58",
    "Base62",
    "Base64",
    "Base64Url",
    "get_alphabet",
    "register_alphabet",
]

"""Tests for the presets module."""

import pytest

from radixword.alphabet import Alphabet
from radixword.presets import (
    ALPHABETS,
    Base2,
    Base16,
    Base32,
    Base58,
    Base62,
    Base64Url,
    get_alphabet,
    register_alphabet,
)


class TestPresetAlphabets:
    """Tests for the preset classes."""

    @pytest.mark.parametrize(
        "name,radix",
        [
            ("base2", 2),
            ("base8", 8),
            ("base10", 10),
            ("base16", 16),
            ("base32", 32),
            ("base32hex", 32),
            ("base36", 36),
            ("base58", 58),
            ("base62", 62),
            ("base64", 64),
            ("base64url", 64),
        ],
    )
    def test_radix(self, name, radix):
        """Test every preset builds with its expected radix."""
        assert get_alphabet(name).radix == radix

    def test_no_arguments(self):
        """Test presets need no constructor arguments."""
        assert str(Base2()) == "01"

    def test_hex(self):
        """Test base16 is lowercase hex."""
        assert str(Base16().parse_long(48879)) == "beef"

    def test_base32_rfc4648(self):
        """Test base32 symbol order."""
        assert Base32().symbols.startswith("ABCDEFG")
        assert Base32().symbols.endswith("234567")

    def test_base58_excludes_ambiguous(self):
        """Test base58 drops look-alike characters."""
        for char in "0OIl":
            assert char not in Base58()

    def test_base62(self):
        """Test base62 values."""
        assert str(Base62().parse_long(61)) == "z"
        assert str(Base62().parse_long(62)) == "10"

    def test_base64url(self):
        """Test base64url uses url-safe symbols."""
        assert Base64Url().symbol(62) == "-"
        assert Base64Url().symbol(63) == "_"

    def test_preset_equals_plain_alphabet(self):
        """Test a preset equals a plain alphabet over its symbols."""
        assert Base2() == Alphabet("01")

    def test_preset_repr(self):
        """Test repr names the preset class."""
        assert repr(Base2()) == "Base2('01')"


class TestRegistry:
    """Tests for get_alphabet and register_alphabet."""

    def test_unknown(self):
        """Test unknown names are rejected with the available list."""
        with pytest.raises(ValueError) as excinfo:
            get_alphabet("base3")
        assert "base62" in str(excinfo.value)

    def test_register(self):
        """Test registering a custom alphabet."""

        class Dna(Alphabet):
            default_symbols = "ACGT"

        register_alphabet("dna", Dna)
        try:
            alphabet = get_alphabet("dna")
            assert isinstance(alphabet, Dna)
            assert str(alphabet.parse_long(27)) == "CGT"
        finally:
            del ALPHABETS["dna"]

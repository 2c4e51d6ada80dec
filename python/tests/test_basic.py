"""
Basic functionality tests for Passforge.
"""

import pytest

from passforge.exceptions import (
    ClipboardError,
    EmptyPoolError,
    GenerationError,
    InvalidOptionsError,
    NoClassSelectedError,
    NothingToCopyError,
    PassforgeException,
)
from passforge.generator.charsets import (
    ALPHABETS,
    AMBIGUOUS_CHARS,
    CLASS_ORDER,
    CharacterClass,
    class_alphabet,
    filter_ambiguous,
    ordered_classes,
)
from passforge.utils.validation import (
    MAX_COUNT,
    MAX_LENGTH,
    get_validation_error_message,
    validate_count,
    validate_length,
)


class TestValidation:
    """Test input validation."""

    def test_valid_values(self):
        """Test that in-range values pass validation."""
        for length in [1, 4, 16, 128, MAX_LENGTH]:
            assert validate_length(length), f"Length {length} should be valid"

        for count in [1, 5, MAX_COUNT]:
            assert validate_count(count), f"Count {count} should be valid"

    def test_invalid_values(self):
        """Test that out-of-range and non-integer values fail validation."""
        invalid = [0, -1, MAX_LENGTH + 1, "16", 16.0, None, True]

        for value in invalid:
            assert not validate_length(value), f"Length {value!r} should be invalid"

        assert not validate_count(0)
        assert not validate_count(MAX_COUNT + 1)

    def test_validation_error_messages(self):
        """Test validation error messages."""
        assert "at least 1" in get_validation_error_message("length", 0)
        assert f"greater than {MAX_LENGTH}" in get_validation_error_message("length", MAX_LENGTH + 1)
        assert "must be an integer" in get_validation_error_message("count", "5")
        assert get_validation_error_message("count", -2) == "Count must be at least 1"
        assert "Unknown option" in get_validation_error_message("width", 3)


class TestCharsets:
    """Test character classes and alphabets."""

    def test_alphabets(self):
        """Test the fixed alphabets."""
        assert ALPHABETS[CharacterClass.LOWERCASE] == "abcdefghijklmnopqrstuvwxyz"
        assert ALPHABETS[CharacterClass.UPPERCASE] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert ALPHABETS[CharacterClass.DIGIT] == "0123456789"
        assert ALPHABETS[CharacterClass.SYMBOL] == "!@#$%^&*()_+-=[]{}|;:,.<>?/~"

    def test_ambiguous_set(self):
        """Test the ambiguous characters."""
        assert AMBIGUOUS_CHARS == set("0Oo1lI")
        assert not AMBIGUOUS_CHARS & set(ALPHABETS[CharacterClass.SYMBOL])

    def test_filter_ambiguous(self):
        """Test filtering keeps order."""
        assert filter_ambiguous("a0bO1cl") == "abc"
        assert filter_ambiguous("") == ""

    def test_class_alphabet(self):
        """Test per-class alphabets with and without filtering."""
        assert class_alphabet(CharacterClass.DIGIT) == "0123456789"
        assert class_alphabet(CharacterClass.DIGIT, exclude_ambiguous=True) == "23456789"
        assert "I" not in class_alphabet(CharacterClass.UPPERCASE, exclude_ambiguous=True)

    def test_parse(self):
        """Test parsing class names and aliases."""
        assert CharacterClass.parse("lower") is CharacterClass.LOWERCASE
        assert CharacterClass.parse(" UPPERCASE ") is CharacterClass.UPPERCASE
        assert CharacterClass.parse("digits") is CharacterClass.DIGIT
        assert CharacterClass.parse("symbol") is CharacterClass.SYMBOL

        with pytest.raises(ValueError):
            CharacterClass.parse("letters")

        with pytest.raises(ValueError):
            CharacterClass.parse(3)  # type: ignore[arg-type]

    def test_ordered_classes(self):
        """Test classes come back in pool order."""
        shuffled = [CharacterClass.SYMBOL, CharacterClass.LOWERCASE, CharacterClass.DIGIT]

        assert ordered_classes(shuffled) == [CharacterClass.LOWERCASE, CharacterClass.DIGIT, CharacterClass.SYMBOL]
        assert ordered_classes(CLASS_ORDER) == list(CLASS_ORDER)


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test every error derives from the package base exception."""
        assert issubclass(NoClassSelectedError, GenerationError)
        assert issubclass(EmptyPoolError, GenerationError)
        assert issubclass(GenerationError, PassforgeException)
        assert issubclass(InvalidOptionsError, ValueError)
        assert issubclass(NothingToCopyError, ClipboardError)
        assert issubclass(ClipboardError, PassforgeException)

    def test_default_messages(self):
        """Test the user-facing default messages."""
        assert "at least one character class" in str(NoClassSelectedError())
        assert "No characters are left" in str(EmptyPoolError())
        assert "Generate passwords first" in str(NothingToCopyError())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Character classes and the alphabets they draw from.
"""

from enum import Enum
from typing import Iterable, List


class CharacterClass(Enum):
    """A group of characters a password can be built from."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @classmethod
    def parse(cls, name: str) -> "CharacterClass":
        """
        Look up a class by name or alias.

        Args:
            name: Class name such as "lower", "digits" or "symbol"

        Returns:
            Matching CharacterClass

        Raises:
            ValueError: If the name is not a known class
        """
        if not isinstance(name, str):
            raise ValueError(f"Character class must be a name, got {name!r}")
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown character class: {name!r}") from None


ALPHABETS = {
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+-=[]{}|;:,.<>?/~",
}

# Pool order, kept stable so indexing into the pool is reproducible
CLASS_ORDER = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

# Characters easily confused with one another in common fonts
AMBIGUOUS_CHARS = frozenset("0Oo1lI")

_ALIASES = {
    "lower": CharacterClass.LOWERCASE,
    "lowercase": CharacterClass.LOWERCASE,
    "upper": CharacterClass.UPPERCASE,
    "uppercase": CharacterClass.UPPERCASE,
    "digit": CharacterClass.DIGIT,
    "digits": CharacterClass.DIGIT,
    "symbol": CharacterClass.SYMBOL,
    "symbols": CharacterClass.SYMBOL,
}


def filter_ambiguous(chars: str) -> str:
    """Remove ambiguous characters, keeping the order of the rest."""
    return "".join(c for c in chars if c not in AMBIGUOUS_CHARS)


def class_alphabet(char_class: CharacterClass, exclude_ambiguous: bool = False) -> str:
    """
    Get the alphabet of a character class.

    Args:
        char_class: Class to look up
        exclude_ambiguous: Drop visually ambiguous characters (0, O, o, 1, l, I)

    Returns:
        Alphabet string for the class
    """
    alphabet = ALPHABETS[char_class]
    if exclude_ambiguous:
        alphabet = filter_ambiguous(alphabet)
    return alphabet


def ordered_classes(classes: Iterable[CharacterClass]) -> List[CharacterClass]:
    """Return the given classes in pool order."""
    selected = set(classes)
    return [c for c in CLASS_ORDER if c in selected]

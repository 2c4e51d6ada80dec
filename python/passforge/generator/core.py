"""
Password generation: pool building, class-guaranteed sampling and batching.
"""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, NamedTuple, Optional

from ..exceptions import EmptyPoolError, GenerationError, InvalidOptionsError, NoClassSelectedError
from ..utils.validation import get_validation_error_message, validate_count, validate_length
from .charsets import CLASS_ORDER, CharacterClass, class_alphabet, filter_ambiguous, ordered_classes
from .randomness import RandomSource, default_source, draw, pick, shuffle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOptions:
    """Everything needed to generate one batch of passwords."""

    length: int = 16
    count: int = 1
    classes: FrozenSet[CharacterClass] = frozenset(CLASS_ORDER)
    exclude_ambiguous: bool = False
    ensure_all_classes: bool = True

    def __post_init__(self) -> None:
        if not validate_length(self.length):
            raise InvalidOptionsError(get_validation_error_message("length", self.length))

        if not validate_count(self.count):
            raise InvalidOptionsError(get_validation_error_message("count", self.count))

        # Accept class names as well as CharacterClass members
        entries = self.classes
        if isinstance(entries, (str, CharacterClass)):
            entries = [entries]
        try:
            classes = frozenset(
                c if isinstance(c, CharacterClass) else CharacterClass.parse(c)
                for c in entries
            )
        except ValueError as e:
            raise InvalidOptionsError(str(e)) from e
        object.__setattr__(self, "classes", classes)

    @classmethod
    def from_flags(cls,
                   length: int = 16,
                   count: int = 1,
                   lower: bool = True,
                   upper: bool = True,
                   digits: bool = True,
                   symbols: bool = True,
                   exclude_ambiguous: bool = False,
                   ensure_all_classes: bool = True) -> "GenerationOptions":
        """
        Build options from one boolean flag per character class.

        Args:
            length: Password length
            count: Number of passwords in the batch
            lower: Include lowercase letters
            upper: Include uppercase letters
            digits: Include digits
            symbols: Include symbols
            exclude_ambiguous: Exclude visually ambiguous characters
            ensure_all_classes: Guarantee one character from each selected class

        Returns:
            GenerationOptions instance
        """
        flags = {
            CharacterClass.LOWERCASE: lower,
            CharacterClass.UPPERCASE: upper,
            CharacterClass.DIGIT: digits,
            CharacterClass.SYMBOL: symbols,
        }
        return cls(
            length=length,
            count=count,
            classes=frozenset(c for c, enabled in flags.items() if enabled),
            exclude_ambiguous=exclude_ambiguous,
            ensure_all_classes=ensure_all_classes,
        )

    @property
    def selected_classes(self) -> List[CharacterClass]:
        """Selected classes in pool order."""
        return ordered_classes(self.classes)


class GenerationResult(NamedTuple):
    """Outcome of a batch: the passwords, or the reason there are none."""
    passwords: List[str]
    error: Optional[GenerationError] = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[str]:
        """Return the passwords, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.passwords


def build_pool(options: GenerationOptions) -> str:
    """
    Build the candidate character pool for unconstrained sampling.

    Args:
        options: Generation options

    Returns:
        Pool string, empty if nothing is selected or everything was filtered
    """
    pool = "".join(class_alphabet(c) for c in options.selected_classes)

    if options.exclude_ambiguous:
        pool = filter_ambiguous(pool)

    return pool


def ensure_all_classes(selected_classes: Iterable[CharacterClass],
                       pool: str,
                       length: int,
                       exclude_ambiguous: bool = False,
                       source: Optional[RandomSource] = None) -> str:
    """
    Generate one password containing at least one character of every class.

    One character is drawn from each class alphabet, the rest from the full
    pool, and the result is shuffled so the guaranteed characters do not sit
    at fixed positions. Requires len(selected_classes) <= length.

    Args:
        selected_classes: Classes that must be represented
        pool: Full candidate pool
        length: Password length
        exclude_ambiguous: Apply the ambiguous filter to each class alphabet
        source: Random source, secure by default

    Returns:
        Password of exactly length characters

    Raises:
        ValueError: If there are more classes than length
    """
    selected_classes = list(selected_classes)
    if len(selected_classes) > length:
        raise ValueError(
            f"Cannot fit {len(selected_classes)} classes into {length} characters"
        )

    source = source or default_source

    chars = [pick(class_alphabet(c, exclude_ambiguous), source) for c in selected_classes]
    chars.extend(draw(pool, length - len(chars), source))
    shuffle(chars, source)

    return "".join(chars)


def sample_plain(pool: str, length: int, source: Optional[RandomSource] = None) -> str:
    """Generate one password by drawing length characters from pool."""
    return "".join(draw(pool, length, source or default_source))


def describe_options(options: GenerationOptions) -> str:
    """
    Get human-readable description of the character set.

    Returns:
        Description of enabled character classes
    """
    names = {
        CharacterClass.LOWERCASE: "lowercase",
        CharacterClass.UPPERCASE: "uppercase",
        CharacterClass.DIGIT: "digits",
        CharacterClass.SYMBOL: "symbols",
    }
    info = ", ".join(names[c] for c in options.selected_classes) or "no classes"

    if options.exclude_ambiguous:
        info += " (excluding ambiguous chars)"

    return info


class PasswordGenerator:
    """Generate batches of passwords for one set of options."""

    def __init__(self, options: GenerationOptions, source: Optional[RandomSource] = None):
        """
        Initialize the generator.

        Args:
            options: Generation options
            source: Random source used for every draw, secure by default
        """
        self.options = options
        self.source = source or default_source
        self.pool = build_pool(options)

    def check(self) -> Optional[GenerationError]:
        """Return the error that prevents generation, or None."""
        if not self.options.classes:
            return NoClassSelectedError()

        if not self.pool:
            return EmptyPoolError()

        return None

    def generate_one(self) -> str:
        """
        Generate a single password. Call check() first; an empty pool
        makes the draw fail with ValueError.
        """
        options = self.options
        classes = options.selected_classes

        if options.ensure_all_classes and len(classes) <= options.length:
            return ensure_all_classes(classes, self.pool, options.length,
                                      options.exclude_ambiguous, self.source)

        if options.ensure_all_classes:
            logger.debug(
                f"Cannot fit {len(classes)} classes into {options.length} characters, "
                "sampling without class guarantee"
            )

        return sample_plain(self.pool, options.length, self.source)

    def generate(self, cancel: Optional[Callable[[], bool]] = None) -> GenerationResult:
        """
        Generate options.count passwords.

        Args:
            cancel: Optional predicate checked between passwords; when it
                returns True the batch stops and is marked cancelled

        Returns:
            GenerationResult with the passwords or the generation error
        """
        error = self.check()
        if error is not None:
            logger.debug(f"Generation rejected: {error}")
            return GenerationResult([], error)

        passwords: List[str] = []
        for _ in range(self.options.count):
            if cancel is not None and cancel():
                logger.debug(f"Generation cancelled after {len(passwords)} passwords")
                return GenerationResult(passwords, cancelled=True)
            passwords.append(self.generate_one())

        logger.debug(f"Generated {len(passwords)} passwords from a pool of {len(self.pool)} chars")
        return GenerationResult(passwords)


def generate_passwords(options: GenerationOptions,
                       source: Optional[RandomSource] = None,
                       cancel: Optional[Callable[[], bool]] = None) -> GenerationResult:
    """
    Convenience function to generate a batch of passwords.

    Args:
        options: Generation options
        source: Random source, secure by default
        cancel: Optional predicate checked between passwords

    Returns:
        GenerationResult; its error is NoClassSelectedError or EmptyPoolError
        when the options leave nothing to draw from
    """
    return PasswordGenerator(options, source).generate(cancel)

"""
Password generation core.

Builds a character pool from the selected classes, samples passwords from it
(optionally guaranteeing one character per class) and shuffles the result
with an injectable random source.
"""

from .charsets import AMBIGUOUS_CHARS, ALPHABETS, CLASS_ORDER, CharacterClass, class_alphabet, filter_ambiguous
from .core import (
    GenerationOptions,
    GenerationResult,
    PasswordGenerator,
    build_pool,
    describe_options,
    ensure_all_classes,
    generate_passwords,
    sample_plain,
)
from .randomness import RandomSource, SecureRandomSource, SeededRandomSource, pick, shuffle

__all__ = [
    'AMBIGUOUS_CHARS', 'ALPHABETS', 'CLASS_ORDER', 'CharacterClass', 'class_alphabet', 'filter_ambiguous',
    'GenerationOptions', 'GenerationResult', 'PasswordGenerator', 'build_pool', 'describe_options',
    'ensure_all_classes', 'generate_passwords', 'sample_plain',
    'RandomSource', 'SecureRandomSource', 'SeededRandomSource', 'pick', 'shuffle',
]

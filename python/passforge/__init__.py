"""
Passforge - generate batches of random passwords from selected character classes.
"""

from .generator import GenerationOptions, GenerationResult, PasswordGenerator, generate_passwords
from .utils.strength import estimate_strength

__all__ = ['GenerationOptions', 'GenerationResult', 'PasswordGenerator', 'generate_passwords', 'estimate_strength']

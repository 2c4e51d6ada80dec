"""
Interactive review of a generated batch.
"""

from .picker import ReviewApp, review_passwords

__all__ = ['ReviewApp', 'review_passwords']

"""
Phonetic name matching.

This module provides the MRA+ fingerprinting pipeline: words that sound alike
despite different spelling get intersecting fingerprint sets.
"""

from .mraplus import Fingerprinter, fingerprint, phonetic, matches

__all__ = ['Fingerprinter', 'fingerprint', 'phonetic', 'matches']

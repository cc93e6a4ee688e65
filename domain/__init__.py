"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taxonomy: CFI taxonomy models and parsing
- cfi: Code construction, validation and decoding
"""

from domain.cfi import CfiCode, CodeFormat, InvalidCodeError
from domain.taxonomy import Taxonomy

__all__ = [
    "CfiCode",
    "CodeFormat",
    "InvalidCodeError",
    "Taxonomy",
]

"""
CFI codes: construction, validation and decoding.

All functions in this module are pure; the taxonomy is passed in explicitly.
"""

from domain.cfi.code import CODE_LENGTH, PLACEHOLDER, CfiCode, is_structurally_valid, normalize_code
from domain.cfi.decoding import (
    CodeFormat,
    DecodedAttribute,
    DecodedCode,
    category_name,
    decode_code,
    group_name,
    render_code,
)
from domain.cfi.exceptions import InvalidCodeError

__all__ = [
    "CfiCode",
    "InvalidCodeError",
    "CodeFormat",
    "DecodedCode",
    "DecodedAttribute",
    "CODE_LENGTH",
    "PLACEHOLDER",
    "is_structurally_valid",
    "normalize_code",
    "category_name",
    "group_name",
    "decode_code",
    "render_code",
]

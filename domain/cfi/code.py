"""CFI code value: structural validation plus strict and lenient construction."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

from domain.cfi.exceptions import InvalidCodeError
from domain.taxonomy.models import Taxonomy

CODE_LENGTH = 6
PLACEHOLDER = "X"

_CODE_PATTERN = re.compile(r"[A-Z]{6}")
_NON_CODE_CHARS = re.compile(r"[^A-Z]")


def is_structurally_valid(code: object, taxonomy: Taxonomy) -> bool:
    """
    Check a candidate code against the taxonomy.

    Requires six uppercase ASCII letters with a known category (position 0)
    and a known group within it (position 1). Attribute characters at
    positions 2-5 are not checked: the reference attribute tables are not
    exhaustive, so unknown values decode to an empty label instead.
    """
    if not isinstance(code, str) or not _CODE_PATTERN.fullmatch(code):
        return False
    return taxonomy.has_group(code[0], code[1])


def normalize_code(raw: object) -> str:
    """
    Coerce arbitrary input into a six-character code string.

    Only the first six characters after uppercasing count; surrounding
    whitespace inside that window is dropped before padding with 'X'.

    Examples:
        >>> normalize_code(" qw12 ")
        'QWXXXX'
        >>> normalize_code("esvufrxx-extra")
        'ESVUFR'
        >>> normalize_code(" abcdefg")
        'ABCDEX'
        >>> normalize_code(None)
        'XXXXXX'
    """
    s = "" if raw is None else str(raw).upper()[:CODE_LENGTH].strip()
    s = s.ljust(CODE_LENGTH, PLACEHOLDER)
    return _NON_CODE_CHARS.sub(PLACEHOLDER, s)


class CfiCode(BaseModel):
    """Immutable six-letter CFI code. Equal codes have equal characters."""

    model_config = ConfigDict(frozen=True)

    tag: str

    @field_validator("tag")
    @classmethod
    def _check_shape(cls, v: str) -> str:
        if not _CODE_PATTERN.fullmatch(v):
            raise ValueError(f"CFI code must be {CODE_LENGTH} uppercase ASCII letters, got {v!r}")
        return v

    @classmethod
    def from_validated(cls, code: object, taxonomy: Taxonomy) -> "CfiCode":
        """
        Strict construction: wrap `code` unchanged if it passes validation.

        Raises:
            InvalidCodeError: If `code` is not six uppercase letters with a known category and group
        """
        if not is_structurally_valid(code, taxonomy):
            raise InvalidCodeError(code)
        return cls(tag=str(code))

    @classmethod
    def from_normalized(cls, raw: object) -> "CfiCode":
        """Lenient construction: never fails and performs no taxonomy lookups.

        `from_normalized(s)` always equals `from_normalized(s.upper()[:6])`.
        """
        return cls(tag=normalize_code(raw))

    @property
    def category_char(self) -> str:
        return self.tag[0]

    @property
    def group_char(self) -> str:
        return self.tag[1]

    @property
    def attribute_chars(self) -> str:
        return self.tag[2:]

    def __str__(self) -> str:
        return self.tag

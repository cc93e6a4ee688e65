"""
CFI code API bound to the process-wide reference taxonomy.

The packaged taxonomy is loaded once on first use and only read afterwards.
Every function takes an optional `taxonomy` to decode against another dataset.
"""

import logging
from functools import lru_cache

from domain.cfi import (
    CfiCode,
    CodeFormat,
    DecodedCode,
    category_name,
    decode_code,
    group_name,
    is_structurally_valid,
    render_code,
)
from domain.taxonomy import Taxonomy
from infrastructure.config import load_taxonomy_config
from infrastructure.constants import TAXONOMY_FILE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_taxonomy() -> Taxonomy:
    """Packaged ISO 10962 taxonomy (loaded once per process)."""
    taxonomy = load_taxonomy_config(TAXONOMY_FILE)
    logger.info("CFI taxonomy %s ready (%d categories)", taxonomy.version, len(taxonomy.categories))
    return taxonomy


def _resolve(taxonomy: Taxonomy | None) -> Taxonomy:
    return taxonomy if taxonomy is not None else default_taxonomy()


def is_valid(code: object, taxonomy: Taxonomy | None = None) -> bool:
    return is_structurally_valid(code, _resolve(taxonomy))


def from_validated(code: str, taxonomy: Taxonomy | None = None) -> CfiCode:
    """
    Strict construction.

    Raises:
        InvalidCodeError: If `code` is not six uppercase letters with a known category and group
    """
    return CfiCode.from_validated(code, _resolve(taxonomy))


def from_normalized(raw: object) -> CfiCode:
    """Lenient construction: uppercase, pad/truncate to six with 'X'. Never fails."""
    return CfiCode.from_normalized(raw)


def category(code: CfiCode, taxonomy: Taxonomy | None = None) -> str:
    return category_name(code, _resolve(taxonomy))


def group(code: CfiCode, taxonomy: Taxonomy | None = None) -> str:
    return group_name(code, _resolve(taxonomy))


def decode(code: CfiCode, taxonomy: Taxonomy | None = None) -> DecodedCode:
    return decode_code(code, _resolve(taxonomy))


def format_code(
    code: CfiCode,
    fmt: CodeFormat | str = CodeFormat.TAG,
    taxonomy: Taxonomy | None = None,
) -> str:
    """Render `code` as its tag, a one-line decoding or a multi-line decoding."""
    return render_code(code, fmt, _resolve(taxonomy))

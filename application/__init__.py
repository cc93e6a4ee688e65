"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it binds the
CFI code API to the packaged reference taxonomy and implements batch decoding.
"""

from application.batch import decode_codes_frame, detect_code_column
from application.codes import (
    category,
    decode,
    default_taxonomy,
    format_code,
    from_normalized,
    from_validated,
    group,
    is_valid,
)
from application.serialize import decoded_records, serialize_decoded
from application.summary import summarize_by_group

__all__ = [
    # Code API
    "from_validated",
    "from_normalized",
    "is_valid",
    "category",
    "group",
    "decode",
    "format_code",
    "default_taxonomy",
    # Batch workflows
    "decode_codes_frame",
    "detect_code_column",
    "summarize_by_group",
    "decoded_records",
    "serialize_decoded",
]

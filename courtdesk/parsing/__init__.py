"""
Response parsing helpers.
"""

from .reply import (
    extract_field,
    parse_case_summary,
    parse_firm_cases,
    status_tone,
    strip_summary_block,
)

__all__ = [
    "extract_field",
    "parse_case_summary",
    "parse_firm_cases",
    "status_tone",
    "strip_summary_block",
]

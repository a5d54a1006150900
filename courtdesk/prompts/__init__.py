"""
Prompt construction for case lookups, firm sync, and the live display board.
"""

from .builder import (
    build_firm_list_prompt,
    build_live_board_prompt,
    build_prompt,
    build_single_case_prompt,
)

__all__ = [
    "build_prompt",
    "build_single_case_prompt",
    "build_firm_list_prompt",
    "build_live_board_prompt",
]

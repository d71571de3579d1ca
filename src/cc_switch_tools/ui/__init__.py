"""Console output helpers."""

from cc_switch_tools.ui.display import (
    bold,
    print_header,
    print_next_steps,
    print_path_guidance,
    print_verify_hint,
    print_version_summary,
)

__all__ = [
    "bold",
    "print_header",
    "print_next_steps",
    "print_path_guidance",
    "print_verify_hint",
    "print_version_summary",
]

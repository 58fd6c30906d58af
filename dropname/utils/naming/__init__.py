"""Naming utilities package.

Filename splitting and low-level rename helpers.
"""

from dropname.utils.naming.name_splitter import split_name, split_path
from dropname.utils.naming.rename_logic import is_case_only_change, safe_case_rename

__all__ = [
    "is_case_only_change",
    "safe_case_rename",
    "split_name",
    "split_path",
]

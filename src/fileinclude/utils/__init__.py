"""
fileinclude.utils – Small shared path helpers.
"""
from .paths import join_path, last_segment, parent_segments, is_hidden_path

__all__ = ["join_path", "last_segment", "parent_segments", "is_hidden_path"]

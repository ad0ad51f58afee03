"""Input staging module - sanitizes and loads job input files."""

from .file_staging import copy_file_without_bad_chars, read_database_list

__all__ = ["copy_file_without_bad_chars", "read_database_list"]

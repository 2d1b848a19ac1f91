"""Shared router helpers."""

from .error_handling import handle_directory_errors
from .pagination import PageParams, get_page_params

__all__ = ["PageParams", "get_page_params", "handle_directory_errors"]

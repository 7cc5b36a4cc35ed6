"""
Common utilities shared across routers.
"""

from .pagination import PageParams, get_page_params, set_pagination_header

__all__ = [
    "PageParams",
    "get_page_params",
    "set_pagination_header",
]

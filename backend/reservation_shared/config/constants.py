"""
Centralized constants for the backend application.

Usage:
    from reservation_shared.config.constants import Limits, Positions

    page_size = min(page_size, Limits.MAX_PAGE_SIZE)
"""

from typing import Final


# =============================================================================
# Limits
# =============================================================================


class Limits:
    """Pagination and input limits shared by every list endpoint."""

    DEFAULT_PAGE_NUMBER: Final[int] = 1
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MIN_PAGE_SIZE: Final[int] = 1
    MAX_PAGE_SIZE: Final[int] = 20
    MAX_SEARCH_TERM_LENGTH: Final[int] = 100

    # Largest value a 64-bit signed INTEGER column can hold
    MAX_ID: Final[int] = 2**63 - 1
    MAX_COUNT: Final[int] = 2**63 - 1

    # Keeps (page_number - 1) * MAX_PAGE_SIZE within MAX_ID
    MAX_PAGE_NUMBER: Final[int] = MAX_ID // MAX_PAGE_SIZE + 1


# =============================================================================
# Field lengths
# =============================================================================


class FieldLengths:
    """Maximum string lengths, shared by ORM columns and request schemas."""

    CUSTOMER_NAME: Final[int] = 50
    CUSTOMER_EMAIL: Final[int] = 255
    CUSTOMER_PHONE: Final[int] = 10

    RESTAURANT_NAME: Final[int] = 50
    RESTAURANT_ADDRESS: Final[int] = 100
    RESTAURANT_PHONE: Final[int] = 15

    EMPLOYEE_NAME: Final[int] = 20
    EMPLOYEE_POSITION: Final[int] = 20

    MENU_ITEM_NAME: Final[int] = 50
    MENU_ITEM_DESCRIPTION: Final[int] = 200

    USERNAME: Final[int] = 100
    PASSWORD_HASH: Final[int] = 255


# =============================================================================
# Domain values
# =============================================================================


class Positions:
    """Employee position values with special meaning."""

    MANAGER: Final[str] = "manager"


MIN_PARTY_SIZE: Final[int] = 1


# =============================================================================
# HTTP
# =============================================================================


PAGINATION_HEADER: Final[str] = "X-Pagination"
REQUEST_ID_HEADER: Final[str] = "X-Request-ID"

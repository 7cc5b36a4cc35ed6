"""
Services module for business logic.

- base_service: generic CRUD orchestration shared by every resource
- patching: JSON Patch application and validation of update views
- mappers: explicit entity <-> schema mapping
- domain/: one service per resource
"""

from .base_service import CrudService, Reference
from .patching import UpdateView, apply_operations, validate_view

__all__ = [
    "CrudService",
    "Reference",
    "UpdateView",
    "apply_operations",
    "validate_view",
]

"""
Shared Pydantic schemas used across the application.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from reservation_shared.config.constants import FieldLengths


class CamelModel(BaseModel):
    """Base for API schemas: snake_case in Python, camelCase on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# =============================================================================
# Common Types
# =============================================================================

PatchOp = Literal["add", "remove", "replace", "move", "copy", "test"]


# =============================================================================
# Authentication Schemas
# =============================================================================


class UserCredentials(CamelModel):
    """Register and login request body."""

    username: str = Field(min_length=1, max_length=FieldLengths.USERNAME)
    password: str = Field(min_length=1, max_length=128)


# =============================================================================
# Patch Schemas
# =============================================================================


class PatchOperation(BaseModel):
    """
    One JSON Patch style instruction.

        {"op": "replace", "path": "/firstName", "value": "Ana"}
        {"op": "copy", "from": "/firstName", "path": "/lastName"}

    ``value`` is optional because ``remove``, ``move`` and ``copy`` do not
    carry one; its presence is checked when the operation is applied.
    """

    op: PatchOp
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")

    model_config = {"populate_by_name": True}

    @property
    def has_value(self) -> bool:
        return "value" in self.model_fields_set


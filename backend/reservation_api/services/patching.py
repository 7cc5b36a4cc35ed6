"""
JSON Patch application for partial updates.

A patch runs against an *update view*: a dict of the entity's patchable
fields keyed by their camelCase names. Operations are applied in order to
that dict only, so they can never reach identity or foreign key columns.

Two failure kinds are kept apart:
- MalformedPatchError: the document cannot be applied (bad op target,
  missing value, value of the wrong type, failed ``test``)
- ValidationError: the patched view breaks a field constraint; every
  violation is reported, not just the first
"""

from typing import Any, Callable, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from reservation_shared.utils.exceptions import MalformedPatchError, ValidationError
from reservation_shared.utils.schemas import PatchOperation

UpdateT = TypeVar("UpdateT", bound=BaseModel)


class UpdateView:
    """
    The mutable snapshot a patch is applied to.

    Paths resolve case-insensitively against the schema's field aliases.
    """

    def __init__(self, schema: type[BaseModel], values: dict[str, Any]):
        self.schema = schema
        self.values = dict(values)
        self._aliases: dict[str, str] = {}
        self._adapters: dict[str, TypeAdapter] = {}
        for name, field in schema.model_fields.items():
            alias = field.alias or name
            self._aliases[alias.lower()] = alias
            self._adapters[alias] = TypeAdapter(field.annotation)

    @classmethod
    def of(cls, update: BaseModel) -> "UpdateView":
        return cls(type(update), update.model_dump(by_alias=True))

    def resolve(self, pointer: str | None, index: int) -> str:
        """Map a single-segment JSON pointer to a field alias."""
        if not pointer or not pointer.startswith("/"):
            raise MalformedPatchError(f"Invalid path '{pointer}'", index=index)

        segment = pointer[1:]
        if not segment or "/" in segment:
            raise MalformedPatchError(f"Path '{pointer}' is not patchable", index=index)

        segment = segment.replace("~1", "/").replace("~0", "~")
        alias = self._aliases.get(segment.lower())
        if alias is None:
            raise MalformedPatchError(f"Path '{pointer}' is not patchable", index=index)
        return alias

    def coerce(self, alias: str, value: Any, index: int) -> Any:
        """
        Convert a value to the field's type.

        Null passes through so that required-ness is reported by validation.
        Constraints (length, range) are also left to validation.
        """
        if value is None:
            return None
        try:
            return self._adapters[alias].validate_python(value)
        except PydanticValidationError:
            raise MalformedPatchError(
                f"Value {value!r} is not valid for '{alias}'", index=index
            )


def _require_value(operation: PatchOperation, index: int) -> Any:
    if not operation.has_value:
        raise MalformedPatchError(f"'{operation.op}' requires a value", index=index)
    return operation.value


def _require_from(view: UpdateView, operation: PatchOperation, index: int) -> str:
    if operation.from_ is None:
        raise MalformedPatchError(f"'{operation.op}' requires 'from'", index=index)
    return view.resolve(operation.from_, index)


def _add(view: UpdateView, operation: PatchOperation, index: int) -> None:
    target = view.resolve(operation.path, index)
    view.values[target] = view.coerce(target, _require_value(operation, index), index)


def _remove(view: UpdateView, operation: PatchOperation, index: int) -> None:
    target = view.resolve(operation.path, index)
    view.values[target] = None


def _copy(view: UpdateView, operation: PatchOperation, index: int) -> None:
    source = _require_from(view, operation, index)
    target = view.resolve(operation.path, index)
    view.values[target] = view.coerce(target, view.values[source], index)


def _move(view: UpdateView, operation: PatchOperation, index: int) -> None:
    source = _require_from(view, operation, index)
    target = view.resolve(operation.path, index)
    view.values[target] = view.coerce(target, view.values[source], index)
    if source != target:
        view.values[source] = None


def _test(view: UpdateView, operation: PatchOperation, index: int) -> None:
    target = view.resolve(operation.path, index)
    expected = view.coerce(target, _require_value(operation, index), index)
    if view.values[target] != expected:
        raise MalformedPatchError(f"Test failed for '{operation.path}'", index=index)


_HANDLERS: dict[str, Callable[[UpdateView, PatchOperation, int], None]] = {
    "add": _add,
    "replace": _add,
    "remove": _remove,
    "copy": _copy,
    "move": _move,
    "test": _test,
}


def apply_operations(view: UpdateView, operations: Sequence[PatchOperation]) -> UpdateView:
    """Apply operations in order. Stops at the first malformed one."""
    for index, operation in enumerate(operations):
        _HANDLERS[operation.op](view, operation, index)
    return view


def validate_view(view: UpdateView, schema: type[UpdateT]) -> UpdateT:
    """
    Validate the patched view against its schema.

    Raises:
        ValidationError: listing every violated constraint as
            ``{field, rule, message}``.
    """
    try:
        return schema.model_validate(view.values)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]) or "__root__",
                "rule": error["type"],
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        raise ValidationError(
            "One or more validation errors occurred.",
            errors=errors,
            schema=schema.__name__,
        )

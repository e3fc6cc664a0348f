"""Single-field queries with a shorthand and an expanded form.

Queries such as ``term`` or ``match`` accept two wire shapes for the same
field::

    {"term": {"status": "active"}}
    {"term": {"status": {"value": "active", "boost": 2.0}}}

`FieldQuery` owns the promotion rule: the first option set on a shorthand
entry expands it into the object form under `value_key`, and later options
merge into that object.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, TypeVar

from SearchDSL.core.query import Query
from SearchDSL.core.types import record_operation

F_T = TypeVar("F_T", bound="FieldQuery")


class FieldQuery(Query):
    """Base for ``{kind: {field: value | {value_key: value, ...}}}`` bodies."""

    value_key: ClassVar[str] = "value"

    __slots__ = ()

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            {self.kind: {field: value}},
            origin=record_operation(self.factory_name, (field, value)),
        )

    def get_field(self) -> str:
        """Return the target field name."""
        return next(iter(self._section()), "")

    def _entry(self) -> Any:
        return self._section().get(self.get_field())

    def _is_expanded(self, entry: Any) -> bool:
        return isinstance(entry, Mapping) and self.value_key in entry

    def _options(self) -> dict[str, Any]:
        """Return the entry in expanded form as a mutable dict."""
        entry = self._entry()
        if self._is_expanded(entry):
            return dict(entry)
        return {self.value_key: entry}

    def _base_value(self) -> Any:
        entry = self._entry()
        if self._is_expanded(entry):
            return entry[self.value_key]
        return entry

    def _get_option(self, key: str, default: Any = None) -> Any:
        entry = self._entry()
        if self._is_expanded(entry):
            return entry.get(key, default)
        return default

    def _with_option(self: F_T, key: str, value: Any, method: str | None = None) -> F_T:
        """Set one option on the field entry, promoting shorthand if needed."""
        options = self._options()
        options[key] = value
        return self._derive(method or key, (value,), {self.get_field(): options})

    def get_boost(self) -> float | None:
        return self._get_option("boost")

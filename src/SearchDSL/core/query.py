"""Immutable query base class.

Every query variant derives from `Query`. An instance pairs one frozen body
(the wire document) with one frozen `QueryMetadata`. Builder methods never
touch the receiver: they record an `Operation` and return a new instance via
`Query.clone_with`.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Mapping, TypeVar

from SearchDSL.core.freeze import deep_freeze, structural_equal, structural_key, thaw, to_json
from SearchDSL.core.types import Operation, QueryMetadata, QueryRef, record_operation

Q_T = TypeVar("Q_T", bound="Query")


class Query:
    """Base class for immutable query builders.

    Subclasses set `kind` to the top-level body key they produce (``term``,
    ``bool``, ...) and `factory_name` to the `Q` helper that constructs them.
    `code_methods` lists the builder methods replayed by `to_code`.
    """

    kind: ClassVar[str] = ""
    factory_name: ClassVar[str] = ""
    code_methods: ClassVar[frozenset[str]] = frozenset()

    __slots__ = ("_body", "_metadata")

    def __init__(
        self,
        body: Mapping[str, Any],
        metadata: QueryMetadata | Mapping[str, Any] | None = None,
        *,
        origin: Operation | None = None,
    ) -> None:
        """Freeze ``body`` and attach metadata.

        Args:
            body: Wire document. It is deep-copied, so later changes to the
                caller's object have no effect.
            metadata: Either a complete `QueryMetadata` or a mapping of
                overrides (``id``, ``operations``, ``created``, ``source``).
            origin: Recorded constructor call, used only when ``metadata``
                does not already carry one.
        """
        object.__setattr__(self, "_body", deep_freeze(body))
        object.__setattr__(self, "_metadata", _resolve_metadata(metadata, origin))

    @classmethod
    def from_body(
        cls: type[Q_T],
        body: Mapping[str, Any],
        metadata: QueryMetadata | Mapping[str, Any] | None = None,
    ) -> Q_T:
        """Build an instance directly from a body, bypassing the constructor."""
        query = cls.__new__(cls)
        Query.__init__(query, body, metadata)
        return query

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self: Q_T) -> Q_T:
        return self

    def __deepcopy__(self: Q_T, memo: dict[int, Any]) -> Q_T:
        return self

    @property
    def id(self) -> str:
        """Unique id of this instance."""
        return self._metadata.id

    @property
    def metadata(self) -> QueryMetadata:
        return self._metadata

    @property
    def frozen_body(self) -> Mapping[str, Any]:
        """Read-only view of the internal body."""
        return self._body

    def to_dict(self) -> dict[str, Any]:
        """Return the wire document as a fresh plain ``dict``.

        The result shares nothing with the instance; mutating it is safe.
        """
        return thaw(self._body)

    def to_json(self, indent: int | None = None) -> str:
        return to_json(self._body, indent=indent)

    def clone_with(self: Q_T, body: Mapping[str, Any], operation: Operation | None = None) -> Q_T:
        """Return a new instance of the same variant carrying ``body``.

        Args:
            body: New wire document.
            operation: Operation to append to the history. When omitted the
                history is copied unchanged.

        Returns:
            A distinct instance; the receiver is left untouched.
        """
        return type(self).from_body(body, self._metadata.derive(operation))

    def equals(self, other: object) -> bool:
        """Return True when both queries hold the same document.

        Metadata is ignored. Sequences compare in order; mapping key order
        does not matter.
        """
        if not isinstance(other, Query):
            return False
        return structural_equal(self._body, other._body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(structural_key(self._body))

    def apply_if(self: Q_T, condition: Any, fn: Callable[[Q_T], Q_T]) -> Q_T:
        """Return ``fn(self)`` when ``condition`` is truthy, else ``self``."""
        return fn(self) if condition else self

    def apply_unless(self: Q_T, condition: Any, fn: Callable[[Q_T], Q_T]) -> Q_T:
        """Return ``fn(self)`` when ``condition`` is falsy, else ``self``."""
        return self if condition else fn(self)

    def to_code(self) -> str:
        """Rebuild the builder calls that produced this instance.

        Best effort: only methods listed in `code_methods` are replayed, and
        query arguments are rendered from the body snapshot taken when they
        were passed in.

        Returns:
            Python source using the ``Q`` helper.
        """
        origin = self._metadata.origin
        if origin is None:
            head = f"Q.from_dict({self.to_dict()!r})"
        else:
            head = "Q." + format_call(origin)
        calls = [format_call(op) for op in self._metadata.operations if op.method in self.code_methods]
        if not calls:
            return head
        return "(\n    " + "\n    .".join([head, *calls]) + "\n)"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({to_json(self._body)})"

    # Helpers for variants

    def _section(self) -> dict[str, Any]:
        """Return a shallow, mutable copy of the body under `kind`."""
        section = self._body.get(self.kind)
        return dict(section) if isinstance(section, Mapping) else {}

    def _derive(self: Q_T, method: str, args: tuple[Any, ...], section: Mapping[str, Any]) -> Q_T:
        """Record ``method`` and return a copy whose `kind` section is ``section``."""
        operation = record_operation(method, args)
        return self.clone_with({self.kind: section}, operation)

    def _set(self: Q_T, key: str, value: Any, method: str | None = None) -> Q_T:
        """Set one key of the `kind` section, recording ``method`` (default ``key``)."""
        section = self._section()
        section[key] = value
        return self._derive(method or key, (value,), section)


def format_call(operation: Operation) -> str:
    """Render one recorded call as ``method(arg, ...)``."""
    return f"{operation.method}({', '.join(format_arg(arg) for arg in operation.args)})"


def format_arg(arg: Any) -> str:
    if isinstance(arg, QueryRef):
        return f"Q.from_dict({thaw(arg.body)!r})"
    if isinstance(arg, tuple):
        return "[" + ", ".join(format_arg(item) for item in arg) + "]"
    return repr(thaw(arg))


def snapshot(query: Query) -> dict[str, Any]:
    """Return the body embedded when ``query`` is nested in another query."""
    return query.to_dict()


def _resolve_metadata(
    metadata: QueryMetadata | Mapping[str, Any] | None,
    origin: Operation | None,
) -> QueryMetadata:
    if isinstance(metadata, QueryMetadata):
        return metadata
    overrides = dict(metadata or {})
    if "operations" in overrides:
        overrides["operations"] = tuple(overrides["operations"])
    overrides.setdefault("origin", origin)
    return QueryMetadata(**overrides)

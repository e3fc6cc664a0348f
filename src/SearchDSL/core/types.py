"""Value types carried in query metadata."""

from __future__ import annotations

import itertools
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from SearchDSL.core.freeze import deep_freeze, thaw

_query_counter = itertools.count(1)


def now_ms() -> float:
    """Return the current wall clock time in epoch milliseconds."""
    return time.time() * 1000


def generate_query_id() -> str:
    """Return a process-unique query id."""
    return f"q_{next(_query_counter)}_{int(now_ms())}"


def generate_operation_id() -> str:
    """Return a random operation id."""
    return f"op_{int(now_ms())}_{uuid.uuid4().hex[:9]}"


@dataclass(frozen=True, slots=True)
class QueryRef:
    """Snapshot of a query passed as an argument to a recorded call.

    Attributes:
        id: Id of the referenced query at call time.
        body: Frozen copy of the referenced query body at call time.
    """

    id: str
    body: Mapping[str, Any]
    kind: str = "Query"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "id": self.id, "body": thaw(self.body)}


@dataclass(frozen=True, slots=True)
class Operation:
    """One recorded builder call.

    Attributes:
        method: Name of the builder method (or factory function).
        args: Recorded arguments. Query arguments are stored as `QueryRef`.
        timestamp: Call time in epoch milliseconds.
        id: Random operation id.
    """

    method: str
    args: tuple[Any, ...] = ()
    timestamp: float = field(default_factory=now_ms)
    id: str = field(default_factory=generate_operation_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "args": [_arg_to_dict(arg) for arg in self.args],
            "timestamp": self.timestamp,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Operation:
        """Rebuild an operation from its `to_dict` form."""
        args = tuple(_arg_from_dict(arg) for arg in raw.get("args", ()))
        return cls(
            method=str(raw["method"]),
            args=args,
            timestamp=float(raw.get("timestamp", now_ms())),
            id=str(raw.get("id") or generate_operation_id()),
        )


def _arg_to_dict(arg: Any) -> Any:
    if isinstance(arg, QueryRef):
        return arg.to_dict()
    if isinstance(arg, tuple):
        return [_arg_to_dict(item) for item in arg]
    return thaw(arg)


def _arg_from_dict(raw: Any) -> Any:
    if isinstance(raw, Mapping) and raw.get("kind") == "Query" and "body" in raw:
        return QueryRef(id=str(raw.get("id", "")), body=deep_freeze(raw["body"]))
    if isinstance(raw, list) and any(isinstance(item, Mapping) and item.get("kind") == "Query" for item in raw):
        return tuple(_arg_from_dict(item) for item in raw)
    return deep_freeze(raw)


def record_operation(method: str, args: Sequence[Any]) -> Operation:
    """Create an `Operation` with arguments made safe to keep.

    Query arguments are replaced by a `QueryRef` holding a snapshot of their
    body; every other argument is deep-frozen so the log never exposes state
    a caller could still mutate.

    Args:
        method: Recorded method name.
        args: Positional arguments as passed by the caller.

    Returns:
        New operation record.
    """
    from SearchDSL.core.query import Query

    def convert(arg: Any) -> Any:
        if isinstance(arg, Query):
            return QueryRef(id=arg.id, body=arg.frozen_body)
        if isinstance(arg, (list, tuple)) and any(isinstance(item, Query) for item in arg):
            return tuple(convert(item) for item in arg)
        return deep_freeze(arg)

    return Operation(method=method, args=tuple(convert(arg) for arg in args))


@dataclass(frozen=True, slots=True)
class QueryMetadata:
    """Identity and history of one query instance.

    Attributes:
        id: Unique instance id.
        operations: Builder calls applied since construction, in order.
        created: Creation time in epoch milliseconds.
        source: Optional provenance string (e.g. the config entry name).
        origin: Recorded constructor call used to head generated code.
    """

    id: str = field(default_factory=generate_query_id)
    operations: tuple[Operation, ...] = ()
    created: float = field(default_factory=now_ms)
    source: str | None = None
    origin: Operation | None = None

    def derive(self, operation: Operation | None = None) -> QueryMetadata:
        """Return metadata for a derived instance.

        The derived metadata gets a fresh id and creation time, keeps the
        provenance and origin, and appends ``operation`` when given.
        """
        operations = self.operations + (operation,) if operation is not None else self.operations
        return QueryMetadata(operations=operations, source=self.source, origin=self.origin)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "operations": [op.to_dict() for op in self.operations],
            "created": self.created,
        }
        if self.source is not None:
            out["source"] = self.source
        if self.origin is not None:
            out["origin"] = self.origin.to_dict()
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> QueryMetadata:
        """Rebuild metadata from its `to_dict` form."""
        origin = raw.get("origin")
        return cls(
            id=str(raw.get("id") or generate_query_id()),
            operations=tuple(Operation.from_dict(op) for op in raw.get("operations", ())),
            created=float(raw.get("created", now_ms())),
            source=raw.get("source"),
            origin=Operation.from_dict(origin) if origin else None,
        )

"""Aggregating per-field metrics over structured records."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from ..base import Metric, MetricBase
from ..config import DEFAULT_P, TextSummaryOptions
from ..errors import MissingFieldError
from ..formatting import dotted_repr, indent
from .elementwise import check_exponent, p_norm


def get_field(record: Any, name: str, operand: str) -> Any:
    """Read field `name` from a mapping (by key) or any other record (by attribute)."""
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
    elif hasattr(record, name):
        return getattr(record, name)
    raise MissingFieldError(f"{operand} has no field {name!r}.", context={"field": name, "operand": operand})


@dataclass(frozen=True)
class _NamedAggregate(MetricBase):
    """Common machinery for metrics that compare records field by field.

    Only the declared fields are read; extra fields on the operands are ignored.
    Fields are visited in declaration order.
    """

    fields: Mapping[str, Metric]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, name: str) -> Metric:
        return self.fields[name]

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.fields.items())))

    def field_distances(self, data: Any, model: Any) -> Iterator[float]:
        for name, metric in self.fields.items():
            yield metric.distance(get_field(data, name, "data"), get_field(model, name, "model"))

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str:
        lines = ["total: " + dotted_repr(options, self.distance(data, model))]
        for name, metric in self.fields.items():
            nested = metric.summary(get_field(data, name, "data"), get_field(model, name, "model"), options)
            lines.append(indent(f"from {name}:\n" + indent(nested, options.indent), options.indent))
        return "\n".join(lines)

    def _fields_repr(self) -> str:
        if all(name.isidentifier() for name in self.fields):
            return ", ".join(f"{name}={metric!r}" for name, metric in self.fields.items())
        return repr(dict(self.fields))


@dataclass(frozen=True)
class NamedSum(_NamedAggregate):
    """Sum of the per-field distances.

    >>> metric = NamedSum({"a": RelativeDifference(), "b": AbsoluteDifference()})
    >>> distance(metric, {"a": 1, "b": 2, "c": "ignored"}, {"a": 3, "b": 4})
    4.0
    """

    __hash__ = _NamedAggregate.__hash__

    @classmethod
    def from_fields(cls, **fields: Metric) -> "NamedSum":
        """Keyword constructor, `NamedSum.from_fields(a=AbsoluteDifference(), ...)`."""
        return cls(fields)

    def distance(self, data: Any, model: Any) -> float:
        return float(sum(self.field_distances(data, model)))

    def __repr__(self) -> str:
        return f"NamedSum({self._fields_repr()})"


@dataclass(frozen=True)
class NamedPNorm(_NamedAggregate):
    """p-norm of the per-field distances, `p` defaulting to 2.

    >>> metric = NamedPNorm({"a": AbsoluteDifference(), "b": AbsoluteDifference()})
    >>> distance(metric, {"a": 1, "b": 2}, {"a": 3, "b": 4})  # ≈ √8
    2.8284271247461903
    """

    p: float = DEFAULT_P

    def __post_init__(self) -> None:
        super().__post_init__()
        check_exponent(self.p)

    @classmethod
    def from_fields(cls, p: float = DEFAULT_P, **fields: Metric) -> "NamedPNorm":
        """Keyword constructor, `NamedPNorm.from_fields(a=AbsoluteDifference(), ...)`."""
        return cls(fields, p)

    def distance(self, data: Any, model: Any) -> float:
        return p_norm(list(self.field_distances(data, model)), self.p)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.fields.items()), self.p))

    def __repr__(self) -> str:
        if self.p == DEFAULT_P:
            return f"NamedPNorm({self._fields_repr()})"
        return f"NamedPNorm({self._fields_repr()}, p={self.p!r})"


__all__ = ["NamedPNorm", "NamedSum", "get_field"]

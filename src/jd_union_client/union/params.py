"""Business parameter builders for router operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, fields, is_dataclass


@dataclass(slots=True, frozen=True)
class UnionRequest:
    """One call: router method name plus its business parameter object."""

    method: str
    params: Mapping[str, object]

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or not self.method:
            raise TypeError("method must be a non-empty str")
        if not isinstance(self.params, Mapping):
            raise TypeError("params must be a Mapping")


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def options_to_fields(options: object | None) -> dict[str, object]:
    """Flatten an options model or raw mapping into router field names."""

    if options is None:
        return {}
    if isinstance(options, Mapping):
        return {key: value for key, value in options.items() if value is not None}
    if not is_dataclass(options) or isinstance(options, type):
        raise TypeError("options must be an options dataclass instance or a Mapping")

    result: dict[str, object] = {}
    for item in fields(options):
        value = getattr(options, item.name)
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            value = list(value)
        result[item.metadata.get("wire") or to_camel(item.name)] = value
    return result


def merge_fields(
    required: Mapping[str, object],
    options: object | None = None,
) -> dict[str, object]:
    """Required fields first; option fields never override them."""

    merged = dict(required)
    for key, value in options_to_fields(options).items():
        if key not in merged:
            merged[key] = value
    return merged


def join_values(values: Iterable[object]) -> str:
    return ",".join(str(value) for value in values)


__all__ = [
    "UnionRequest",
    "to_camel",
    "options_to_fields",
    "merge_fields",
    "join_values",
]

"""SSR records as served, and their consolidation across environments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .environment import Environment

_FIELDS = ("name", "description", "key", "url")


@dataclass(frozen=True)
class SsrRecord:
    """One entry returned by the SSR service for a single environment."""

    name: str
    description: str
    key: str
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SsrRecord:
        """Build a record from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        values = {}
        for name in _FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = value
        return cls(**values)

    def matches_pattern(self, pattern: str | None) -> bool:
        """Whether name, description or key contain ``pattern``, ignoring case."""
        if pattern is None:
            return True
        needle = pattern.lower()
        return any(
            needle in text.lower() for text in (self.name, self.description, self.key)
        )


def _empty_urls() -> dict[Environment, str | None]:
    return {env: None for env in Environment}


@dataclass
class SsrResult:
    """An entry consolidated across environments, keyed by its key."""

    name: str
    description: str
    key: str
    urls: dict[Environment, str | None] = field(default_factory=_empty_urls)

    def update_url(self, target: Environment, value: str) -> None:
        """Set the URL for ``target``, replacing any earlier one."""
        self.urls[target] = value

    def __str__(self) -> str:
        lines = [f"{self.name} ({self.key})", self.description]
        lines.extend(
            f"{env} \t {url}" for env in Environment if (url := self.urls[env]) is not None
        )
        return "".join(f"{line}\n" for line in lines)


class Ssr:
    """Record groups retrieved per environment, with an optional filter."""

    def __init__(self) -> None:
        self._groups: list[tuple[Environment, list[SsrRecord]]] = []
        self.pattern: str | None = None

    def set_pattern(self, pattern: str | None) -> Ssr:
        """Filter consolidation by ``pattern`` (case-insensitive); None keeps all."""
        self.pattern = pattern.lower() if pattern is not None else None
        return self

    def add_records(self, target: Environment, records: Iterable[SsrRecord]) -> None:
        """Add the records retrieved for ``target``."""
        self._groups.append((target, list(records)))

    def is_empty(self) -> bool:
        """True when no record group has been added."""
        return not self._groups

    def consolidate(self) -> list[SsrResult]:
        """Merge matching records by key, one URL slot per environment."""
        results: dict[str, SsrResult] = {}
        for target, records in self._groups:
            for record in records:
                if not record.matches_pattern(self.pattern):
                    continue
                result = results.get(record.key)
                if result is None:
                    result = SsrResult(record.name, record.description, record.key)
                    results[record.key] = result
                result.update_url(target, record.url)
        return list(results.values())
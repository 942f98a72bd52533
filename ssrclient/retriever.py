"""Retrieval of SSR records from the service over HTTP."""

from __future__ import annotations

import json
import urllib.request
from collections.abc import Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .environment import Environment
from .errors import NoRecordsToProcess, RequestFailed
from .records import Ssr, SsrRecord

_TIMEOUT = 30
_QUERY_KEY = "env"


def _target_url(url: str, target: Environment) -> str:
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.append((_QUERY_KEY, str(target)))
    return urlunsplit(parts._replace(query=urlencode(query)))


def fetch_records(url: str, target: Environment) -> list[SsrRecord]:
    """Fetch and decode the records the service holds for ``target``."""
    try:
        with urllib.request.urlopen(_target_url(url, target), timeout=_TIMEOUT) as response:
            payload = json.loads(response.read())
        if not isinstance(payload, list):
            raise ValueError("expected a JSON array of records")
        return [SsrRecord.from_dict(item) for item in payload]
    except (OSError, ValueError) as exc:
        raise RequestFailed(exc) from exc


class SsrRetriever:
    """Collects records from one service URL for a list of environments."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.targets: list[Environment] = []

    def add_targets(self, targets: Iterable[Environment]) -> SsrRetriever:
        """Queue more environments to query; returns self for chaining."""
        self.targets.extend(targets)
        return self

    def get(self) -> Ssr:
        """Query every target in order; the first failure aborts."""
        ssr = Ssr()
        for target in self.targets:
            ssr.add_records(target, fetch_records(self.url, target))
        if ssr.is_empty():
            raise NoRecordsToProcess()
        return ssr
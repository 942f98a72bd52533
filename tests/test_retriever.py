import io
import json
import urllib.error
from unittest import mock
from urllib.parse import parse_qs, urlsplit

import pytest

from ssrclient.environment import Environment
from ssrclient.errors import NoRecordsToProcess, RequestFailed
from ssrclient.records import SsrRecord
from ssrclient.retriever import SsrRetriever, fetch_records

BASE = "https://ssr.example.com"


def _serve(by_env):
    """Fake urlopen answering with the JSON for the requested env."""
    requested = []

    def fake_urlopen(url, timeout=None):
        requested.append(url)
        env = parse_qs(urlsplit(url).query)["env"][-1]
        body = by_env[env]
        if isinstance(body, Exception):
            raise body
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        return io.BytesIO(body)

    return fake_urlopen, requested


def _record(key, url):
    return {"name": "name", "description": "description", "key": key, "url": url}


def test_fetch_records_adds_env_query_and_decodes():
    fake, requested = _serve({"qa": [_record("key", "https://url1")]})
    with mock.patch("urllib.request.urlopen", side_effect=fake):
        records = fetch_records(BASE, Environment.QA)

    assert records == [SsrRecord("name", "description", "key", "https://url1")]
    assert parse_qs(urlsplit(requested[0]).query) == {"env": ["qa"]}
    assert requested[0].startswith(BASE)


def test_fetch_records_keeps_existing_query():
    fake, requested = _serve({"dev": [_record("key", "https://url1")]})
    with mock.patch("urllib.request.urlopen", side_effect=fake):
        records = fetch_records(BASE + "/list?team=core", Environment.DEV)

    assert records == [SsrRecord("name", "description", "key", "https://url1")]
    query = parse_qs(urlsplit(requested[0]).query)
    assert query == {"team": ["core"], "env": ["dev"]}


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"name": "n"}',
        b'[{"name": "n"}]',
        urllib.error.URLError("unreachable"),
    ],
)
def test_fetch_records_failures_become_request_failed(body):
    fake, _ = _serve({"prod": body})
    with mock.patch("urllib.request.urlopen", side_effect=fake):
        with pytest.raises(RequestFailed) as info:
            fetch_records(BASE, Environment.PROD)
    assert str(info.value).startswith("Unable to process request.")


def test_get_queries_targets_in_order_and_consolidates():
    fake, requested = _serve(
        {
            "dev": [_record("key", "https://url1")],
            "uat": [_record("key", "https://url2")],
        }
    )
    retriever = SsrRetriever(BASE).add_targets([Environment.DEV, Environment.UAT])
    with mock.patch("urllib.request.urlopen", side_effect=fake):
        results = retriever.get().consolidate()

    assert [parse_qs(urlsplit(u).query)["env"] for u in requested] == [["dev"], ["uat"]]
    assert len(results) == 1
    assert results[0].urls[Environment.DEV] == "https://url1"
    assert results[0].urls[Environment.UAT] == "https://url2"
    assert results[0].urls[Environment.QA] is None


def test_add_targets_accumulates():
    retriever = SsrRetriever(BASE)
    retriever.add_targets([Environment.DEV]).add_targets([Environment.PROD])
    assert retriever.targets == [Environment.DEV, Environment.PROD]


def test_get_without_targets_raises_no_records():
    with pytest.raises(NoRecordsToProcess):
        SsrRetriever(BASE).get()


def test_get_stops_on_first_failure():
    fake, requested = _serve(
        {"dev": urllib.error.URLError("down"), "qa": [_record("key", "https://url1")]}
    )
    retriever = SsrRetriever(BASE).add_targets([Environment.DEV, Environment.QA])
    with mock.patch("urllib.request.urlopen", side_effect=fake):
        with pytest.raises(RequestFailed):
            retriever.get()
    assert len(requested) == 1
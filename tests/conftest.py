"""Test configuration and fixtures for s3-explorer."""

from datetime import datetime, timezone

import pytest

from s3_explorer.objectstorage.clients import ObjectStream
from s3_explorer.objectstorage.listing import ListingCache, ListingPage, ObjectEntry
from s3_explorer.service import ListingService
from s3_explorer.sessions import SessionRegistry

MODIFIED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryStorageClient:
    """Delimiter-aware stand-in for S3 that counts listing calls."""

    def __init__(self, buckets: dict[str, dict[str, int]]):
        self.buckets = buckets
        self.list_calls: list[tuple[str, str, str, object]] = []
        self.read_calls: list[tuple[str, str]] = []

    def list_page(self, bucket, prefix, delimiter="/", continuation_token=None, max_keys=None):
        self.list_calls.append((bucket, prefix, delimiter, continuation_token))
        if bucket not in self.buckets:
            raise RuntimeError("The specified bucket does not exist")

        common_prefixes: list[str] = []
        objects: list[ObjectEntry] = []
        for key in sorted(self.buckets[bucket]):
            if not key.startswith(prefix):
                continue
            rest = key[len(prefix):]
            if delimiter in rest:
                folder = prefix + rest[: rest.index(delimiter) + 1]
                if folder not in common_prefixes:
                    common_prefixes.append(folder)
            else:
                objects.append(
                    ObjectEntry(key=key, size=self.buckets[bucket][key], last_modified=MODIFIED)
                )
        return ListingPage(common_prefixes=tuple(common_prefixes), objects=tuple(objects))

    def read_object(self, bucket, key):
        self.read_calls.append((bucket, key))
        raise NotImplementedError


class ScriptedStorageClient:
    """Returns pre-built pages keyed by the continuation token requested."""

    def __init__(self, pages):
        self.pages = pages
        self.calls: list[dict] = []

    def list_page(self, bucket, prefix, delimiter="/", continuation_token=None, max_keys=None):
        self.calls.append(
            {
                "bucket": bucket,
                "prefix": prefix,
                "delimiter": delimiter,
                "continuation_token": continuation_token,
                "max_keys": max_keys,
            }
        )
        page = self.pages[continuation_token]
        if isinstance(page, Exception):
            raise page
        return page

    def read_object(self, bucket, key):
        return ObjectStream(body=None, content_type="text/plain")  # type: ignore[arg-type]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def docs_client():
    """Bucket ``docs`` holding ``a.txt`` (10 bytes) and ``notes/b.txt`` (20 bytes)."""
    return InMemoryStorageClient({"docs": {"a.txt": 10, "notes/b.txt": 20}})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ListingCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def service(registry, cache):
    return ListingService(registry=registry, cache=cache)


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def make_memory_client():
    """Factory for delimiter-aware in-memory clients."""
    return InMemoryStorageClient


@pytest.fixture
def make_scripted_client():
    """Factory for clients that replay pages keyed by continuation token."""
    return ScriptedStorageClient

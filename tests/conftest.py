"""Shared fixtures: isolated home directory, mock registry, fake lookups."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Mapping

import httpx
import pytest

from getver.config import ConfigLocator, ConfigRepository, GlobalConfig
from getver.engine import RegistryClient
from getver.models import LookupOutcome

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def getver_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("GETVER_HOME", str(home))
    return home


@pytest.fixture
def temp_config_repository(getver_home: Path) -> Iterable[ConfigRepository]:
    yield ConfigRepository(ConfigLocator())


@pytest.fixture
def sample_config() -> GlobalConfig:
    return GlobalConfig(registry_url="https://registry.test/", timeout=2.0, max_workers=4)


@pytest.fixture
def registry_handler() -> Callable[[Mapping[str, object]], Handler]:
    """Build a transport handler from ``name -> response`` rules.

    A rule is a ``(status, body)`` tuple, an exception instance to raise, or a
    callable receiving the request.
    """

    def _builder(rules: Mapping[str, object]) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            name = request.url.path.rsplit("/", 1)[-1]
            rule = rules.get(name, (404, {"errors": [{"detail": "Not Found"}]}))
            if isinstance(rule, Exception):
                raise rule
            if callable(rule):
                return rule(request)
            status, body = rule
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=str(body))

        return handler

    return _builder


@pytest.fixture
def registry_client(
    sample_config: GlobalConfig, registry_handler
) -> Iterable[Callable[[Mapping[str, object]], RegistryClient]]:
    clients: list[RegistryClient] = []

    def _factory(rules: Mapping[str, object]) -> RegistryClient:
        transport = httpx.MockTransport(registry_handler(rules))
        client = RegistryClient(sample_config, client=httpx.Client(transport=transport))
        clients.append(client)
        return client

    yield _factory
    for client in clients:
        client.close()


@pytest.fixture
def fake_lookup() -> Callable[[Mapping[str, LookupOutcome]], Callable[[str], LookupOutcome]]:
    def _builder(outcomes: Mapping[str, LookupOutcome]) -> Callable[[str], LookupOutcome]:
        calls: list[str] = []

        def lookup(name: str) -> LookupOutcome:
            calls.append(name)
            return outcomes[name]

        lookup.calls = calls  # type: ignore[attr-defined]
        return lookup

    return _builder


"""HTTP registry client classifying one lookup per package name."""

from __future__ import annotations

from typing import Protocol

import httpx
import structlog
from pydantic import ValidationError

from ..config import GlobalConfig
from ..errors import NotFoundError, ParseError, RegistryError, TransportError
from ..models import Failed, Found, LookupOutcome, NotFound, PackageMetadata


class Lookup(Protocol):
    def __call__(self, name: str) -> LookupOutcome: ...


def _canonical(name: str) -> str:
    return name.lower().replace("_", "-")


class RegistryClient:
    """Query ``GET /api/v1/<resource>/<name>`` and classify the response."""

    def __init__(
        self,
        config: GlobalConfig,
        client: httpx.Client | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self.logger = logger or structlog.get_logger("getver.registry")
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
        )

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def lookup(self, name: str) -> LookupOutcome:
        try:
            metadata = self.fetch(name)
        except NotFoundError:
            self.logger.info("lookup_not_found", package=name)
            return NotFound(name)
        except RegistryError as exc:
            self.logger.warning(
                "lookup_failed", package=name, error=str(exc), kind=type(exc).__name__
            )
            return Failed(name, str(exc))
        self.logger.info("lookup_found", package=name, version=metadata.max_version)
        return Found(name, metadata.max_version, registry_name=metadata.name)

    def fetch(self, name: str) -> PackageMetadata:
        """Perform the request, raising a :class:`RegistryError` on any failure."""

        url = self.config.endpoint(name)
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise TransportError(name, f"request for '{name}' timed out: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(name, f"request for '{name}' failed: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(name)
        if not response.is_success:
            raise TransportError(
                name, f"unexpected status {response.status_code} for '{name}'"
            )
        return self._parse(name, response)

    def _parse(self, name: str, response: httpx.Response) -> PackageMetadata:
        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(name, f"invalid JSON in response for '{name}'") from exc
        key = self.config.response_key
        if not isinstance(payload, dict) or not isinstance(payload.get(key), dict):
            raise ParseError(name, f"response for '{name}' has no '{key}' object")
        try:
            metadata = PackageMetadata.model_validate(payload[key])
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise ParseError(
                name, f"malformed '{key}' object for '{name}' ({fields or 'invalid'})"
            ) from exc
        if _canonical(metadata.name) != _canonical(name):
            raise ParseError(
                name, f"registry returned metadata for '{metadata.name}' instead of '{name}'"
            )
        return metadata


__all__ = ["Lookup", "RegistryClient"]

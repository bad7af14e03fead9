"""Fetch collections over HTTP"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Union

import httpx

try:
    from typing import TypeAlias
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias

__all__ = ["Fetch", "FetchSettings", "HttpFetcher"]

logger = logging.getLogger(__name__)


Fetch: TypeAlias = Callable[[str], Union[Awaitable[Any], Any]]
"""Retrieve the payload of a source, synchronously or asynchronously"""


def _default_headers() -> dict[str, str]:
    return {"Accept": "application/json"}


@dataclass(frozen=True)
class FetchSettings:
    """Settings of the HTTP fetcher.

    Attributes
    ----------
    timeout_s : float
        Timeout for connecting to and reading from the source, in seconds.
    headers : Mapping[str, str]
        Headers sent with every request.
    follow_redirects : bool
        Whether redirect responses are followed.
    """

    timeout_s: float = 30.0
    headers: Mapping[str, str] = field(default_factory=_default_headers)
    follow_redirects: bool = True


class HttpFetcher:
    """Fetch a JSON document with a single GET request.

    Transport errors, error status codes and undecodable bodies are raised to the
    caller. There are no retries: every call makes exactly one request.
    """

    def __init__(
        self,
        settings: FetchSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or FetchSettings()
        self.transport = transport

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.settings!r})"

    async def __call__(self, source: str) -> Any:
        settings = self.settings
        async with httpx.AsyncClient(
            headers=dict(settings.headers),
            timeout=settings.timeout_s,
            follow_redirects=settings.follow_redirects,
            transport=self.transport,
        ) as client:
            logger.debug("GET %s", source)
            response = await client.get(source)
            response.raise_for_status()
            return response.json()

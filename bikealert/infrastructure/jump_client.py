"""
JUMP listings client.

One GET per resource kind against
``<base_url>/api/networks/<network_id>/<resource>``, asking for a page
large enough to hold the whole network.  There is no pagination loop and
no retry: a failed attempt is final.

Failures are mapped onto the ``bikealert.domain.errors`` hierarchy with
the operation prefix ``jump.<resource>``:

* ``httpx.TimeoutException``      -> ``FetchTimeoutError``
* other ``httpx.HTTPError``       -> ``TransportError``
* status != 200                   -> ``UpstreamError`` (status + body)
* bad JSON / envelope / item      -> ``DecodeError``
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from bikealert.config import Settings
from bikealert.domain.enums import ResourceKind
from bikealert.domain.errors import (
    DecodeError,
    FetchTimeoutError,
    TransportError,
    UpstreamError,
)

from .schemas import Bike, BikesEnvelope, Hub, HubsEnvelope

logger = logging.getLogger(__name__)

PER_PAGE = 999

_ENVELOPES = {
    ResourceKind.BIKES: BikesEnvelope,
    ResourceKind.HUBS: HubsEnvelope,
}


class JumpClient:
    def __init__(
        self,
        network_id: str,
        base_url: str = "https://app.jumpbikes.com",
        timeout: float = 5.0,
        user_agent: str = "Mozilla/5.0",
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.network_id = network_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: Settings, http: Optional[httpx.AsyncClient] = None
    ) -> JumpClient:
        return cls(
            network_id=settings.network_id,
            base_url=settings.base_url,
            timeout=settings.http_timeout_seconds,
            user_agent=settings.user_agent,
            http=http,
        )

    # ── Public API ────────────────────────────────────────────────────

    async def bikes(self) -> list[Bike]:
        """Retrieve every bike in the network."""
        return await self.fetch(ResourceKind.BIKES)

    async def hubs(self) -> list[Hub]:
        """Retrieve every hub in the network."""
        return await self.fetch(ResourceKind.HUBS)

    async def fetch(self, kind: ResourceKind) -> Union[list[Bike], list[Hub]]:
        operation = f"jump.{kind.value}"
        url = self.url_for(kind)

        logger.debug("GET %s", url)
        try:
            response = await self.http.get(
                url,
                params={"collapsed": "false", "per_page": PER_PAGE},
                headers=self.headers(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(
                operation, f"request timed out after {self.timeout:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(operation, str(exc) or type(exc).__name__) from exc

        if response.status_code != httpx.codes.OK:
            raise UpstreamError(operation, response.status_code, _body_text(response))

        try:
            envelope = _ENVELOPES[kind].model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(operation, _first_error(exc)) from exc

        logger.info("Fetched %d %s", len(envelope.items), kind.value)
        return envelope.items

    def url_for(self, kind: ResourceKind) -> str:
        return f"{self.base_url}/api/networks/{self.network_id}/{kind.value}"

    def headers(self) -> dict[str, str]:
        # The API only answers requests that look like they came from the map
        return {
            "Referer": f"https://map.jump.com/?network_id={self.network_id}&theme=jump",
            "User-Agent": self.user_agent,
            "Sec-Fetch-Mode": "cors",
            "Accept": "application/json, text/javascript, */*; q=0.01",
        }

    # ── Lifecycle ─────────────────────────────────────────────────────

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()


def _body_text(response: httpx.Response) -> str:
    try:
        return response.text
    except (UnicodeDecodeError, LookupError) as exc:
        return f"could not read body ({exc})"


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    where = ".".join(str(p) for p in err["loc"])
    if where:
        return f"invalid response at {where!r}: {err['msg']}"
    return f"invalid response: {err['msg']}"

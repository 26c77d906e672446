"""
Real Supply Requests HTTP Client.

Posts the compacted request as JSON to `<base_url>/requests`. One call per
submission: no retries and no idempotency key. Any failure (network, non-2xx,
unparseable body) surfaces as a single TransportError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.requests import RequestsClient, TransportError
from src.necessitous.models import NecessitousRequest

logger = logging.getLogger(__name__)


class RealRequestsClient(RequestsClient):
    def __init__(
        self,
        base_url: str,
        requests_path: str = "requests",
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise ValueError("Supply requests API base URL is not configured.")
        self.base_url = base_url.rstrip("/") + "/"
        self.requests_path = requests_path.lstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def post_json(self, payload: Dict[str, Any], path: str, parse: bool = True) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json"}
        try:
            logger.info("Posting to %s", url)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                logger.info("Received response from %s: status=%s", url, response.status_code)
                return response.json() if parse else response
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error from supply requests API: %s %s", e.response.status_code, e.response.text)
            raise TransportError() from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to supply requests API: %s", e)
            raise TransportError() from e
        except httpx.InvalidURL as e:
            logger.error("Supply requests API URL %s is not valid: %s", url, e)
            raise TransportError() from e
        except ValueError as e:
            logger.error("Supply requests API returned a body that is not JSON: %s", e)
            raise TransportError() from e

    async def send(self, request: NecessitousRequest) -> str:
        data = await self.post_json(request.to_payload(), self.requests_path)
        if not isinstance(data, str):
            logger.error("Supply requests API returned %s instead of a request id", type(data).__name__)
            raise TransportError()
        return data

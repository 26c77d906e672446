"""
Mock Supply Requests Client.

Purpose:
- Accepts compacted requests without any network call
- Keeps every payload it was given so tests can inspect the wire body
- Returns deterministic identifiers: mock-request-1, mock-request-2, ...

Swap:
Replace with clients/real_http/necessitous_requests.py when the backend URL is configured.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from src.integrations.contracts.requests import RequestsClient
from src.necessitous.models import NecessitousRequest

logger = logging.getLogger(__name__)


class MockRequestsClient(RequestsClient):
    def __init__(self) -> None:
        self.sent: List[Dict[str, Any]] = []

    async def send(self, request: NecessitousRequest) -> str:
        self.sent.append(request.to_payload())
        request_id = f"mock-request-{len(self.sent)}"
        logger.info("Mock accepted supply request %s", request_id)
        return request_id

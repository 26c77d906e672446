"""
Supply request contracts.

Defines the boundary between the request builder and the backend that stores
supply requests:
- send(request) posts the compacted request and returns the backend's
  identifier for it (an opaque string).

These contracts must be used by both:
- clients/mocks/necessitous_requests.py (no network, for development/testing)
- clients/real_http/necessitous_requests.py (real API calls)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.necessitous.models import NecessitousRequest


class TransportError(Exception):
    """The request could not be delivered. Timeouts, connection and server errors are not told apart."""

    def __init__(self, message: str = "Failed to send the request") -> None:
        super().__init__(message)
        self.message = message


class RequestsClient(ABC):
    """Every supply request backend client must implement this interface."""

    @abstractmethod
    async def send(self, request: NecessitousRequest) -> str:
        """Submit a compacted request; return the backend's request identifier."""

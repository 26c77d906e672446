"""
Integrations layer.
This package contains all code used to communicate with the backend that
stores supply requests.

Key rule:
- The request builder MUST NOT call external APIs directly.
- Callers hand the built request to a client under src/integrations/clients.
- We use the MOCK client during development and swap to the REAL_HTTP client
  when the backend URL is configured.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/dependencies.py).
"""

from .contracts.requests import RequestsClient, TransportError

__all__ = ["RequestsClient", "TransportError"]

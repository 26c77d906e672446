"""
Process-wide collaborators for the API: configuration, the supply request
client and the draft store.

The selection of mock vs real clients happens here only.
"""

import logging
from functools import lru_cache

from src.database.drafts import DraftStore
from src.integrations.clients.mocks.necessitous_requests import MockRequestsClient
from src.integrations.clients.real_http.necessitous_requests import RealRequestsClient
from src.integrations.contracts.requests import RequestsClient
from src.utils.config_loader import NecessitousConfig, load_necessitous_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> NecessitousConfig:
    return load_necessitous_config()


@lru_cache(maxsize=1)
def get_requests_client() -> RequestsClient:
    config = get_config()
    if config.use_real_client():
        logger.info("Using real supply requests client at %s", config.api.base_url)
        return RealRequestsClient(
            base_url=config.api.base_url,
            requests_path=config.api.requests_path,
            timeout_seconds=config.api.timeout_seconds,
        )
    logger.info("Using mock supply requests client")
    return MockRequestsClient()


@lru_cache(maxsize=1)
def get_drafts() -> DraftStore:
    return DraftStore()

"""
Supply request core: reducers, completeness gate and request builder.
"""
from .models import NecessitousRequest, REQUEST_KEYS
from .reducers import CATEGORY_REDUCERS
from .request import PartialRequestError, build_request, compact, is_complete, require_complete

__all__ = [
    "CATEGORY_REDUCERS",
    "NecessitousRequest",
    "PartialRequestError",
    "REQUEST_KEYS",
    "build_request",
    "compact",
    "is_complete",
    "require_complete",
]

"""
Lightweight in-memory draft store for the step-based request forms.

Drafts hold the JSON form of every step saved so far, so that a real Redis
backend could replace this class without changing the router.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DraftStore:
    def __init__(self) -> None:
        # draft_id -> {"draft_id": ..., "steps": {step_type: step_json}, "updated_at": ...}
        self._drafts: Dict[str, Dict[str, Any]] = {}

    def set_draft(self, draft_id: str, data: Dict[str, Any], ttl: int = 86400) -> None:
        # TTL is ignored in this in-memory implementation.
        self._drafts[draft_id] = dict(data)

    def get_draft(self, draft_id: str) -> Optional[Dict[str, Any]]:
        draft = self._drafts.get(draft_id)
        return dict(draft) if draft is not None else None

    def delete_draft(self, draft_id: str) -> None:
        self._drafts.pop(draft_id, None)

    def ping(self) -> bool:
        return True

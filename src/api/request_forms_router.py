"""
APIRouter for the supply request wizard (step-based) with in-memory drafts
and final submission to the backend.

Endpoints:
- POST /request-forms/start
- PUT  /request-forms/{draft_id}/steps/{step_type}
- GET  /request-forms/{draft_id}
- POST /request-forms/{draft_id}/submit
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from src.api.dependencies import get_drafts, get_requests_client
from src.database.drafts import DraftStore
from src.error_handler import ErrorHandler
from src.integrations.contracts.requests import RequestsClient, TransportError
from src.necessitous.request import build_request, is_complete, require_complete
from src.wizard.steps import STEP_FACTORIES, Step, StepPath, StepType, next_path, parse_steps, prev_path
from src.wizard.validation import FormValidationError, validate_contact_form

logger = logging.getLogger(__name__)

api = APIRouter(tags=["Request forms"])
error_handler = ErrorHandler()


def _now_iso() -> str:
    return datetime.utcnow().isoformat()


def _load_draft(drafts: DraftStore, draft_id: str) -> Dict[str, Any]:
    draft = drafts.get_draft(draft_id)
    if not draft:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft


def _navigation(step: Step) -> Dict[str, Optional[str]]:
    """Paths reachable from `step`; None at either end of the wizard."""
    return {
        "next_path": next_path(step).value if step.type != StepType.SUMMARY else None,
        "prev_path": prev_path(step).value if step.type != StepType.CONTACT else None,
    }


def _with_status(draft: Dict[str, Any]) -> Dict[str, Any]:
    return {**draft, "complete": is_complete(draft["steps"])}


@api.post("/request-forms/start")
def start_form(drafts: DraftStore = Depends(get_drafts)):
    """
    Create a new empty draft positioned on the contact screen.
    Returns the draft object.
    """
    draft_id = str(uuid4())
    draft = {
        "draft_id": draft_id,
        "steps": {},
        "current_path": StepPath.CONTACT.value,
        "updated_at": _now_iso(),
    }
    drafts.set_draft(draft_id, draft)
    return _with_status(draft)


@api.put("/request-forms/{draft_id}/steps/{step_type}")
def save_step(
    draft_id: str,
    step_type: StepType,
    body: Dict[str, Any],
    drafts: DraftStore = Depends(get_drafts),
):
    """
    Validate one screen, store it as a step of the draft and move the draft
    to the following screen. Returns the updated draft with next/prev paths.
    """
    draft = _load_draft(drafts, draft_id)
    try:
        payload = validate_contact_form(body) if step_type == StepType.CONTACT else body
        step = STEP_FACTORIES[step_type](payload)
    except (FormValidationError, ValidationError) as e:
        raise error_handler.to_http(e)

    navigation = _navigation(step)
    steps = dict(draft.get("steps") or {})
    steps[step_type.value] = step.model_dump(mode="json", by_alias=True, exclude_none=True)
    draft["steps"] = steps
    draft["current_path"] = navigation["next_path"] or step.path
    draft["updated_at"] = _now_iso()
    drafts.set_draft(draft_id, draft)

    return {**_with_status(draft), **navigation}


@api.get("/request-forms/{draft_id}")
def get_form(draft_id: str, drafts: DraftStore = Depends(get_drafts)):
    """Return the full draft object or 404 if missing."""
    return _with_status(_load_draft(drafts, draft_id))


@api.post("/request-forms/{draft_id}/submit")
async def submit_form(
    draft_id: str,
    drafts: DraftStore = Depends(get_drafts),
    client: RequestsClient = Depends(get_requests_client),
):
    """
    Build the request from the draft and send it. The draft is dropped only
    after the backend accepted the request.
    Returns: { id: ..., sections: [...] }
    """
    draft = _load_draft(drafts, draft_id)
    try:
        require_complete(draft["steps"])
        request = build_request(parse_steps(draft["steps"]))
        request_id = await client.send(request)
    except (FormValidationError, TransportError) as e:
        raise error_handler.to_http(e)

    drafts.delete_draft(draft_id)
    logger.info("Draft %s submitted as request %s", draft_id, request_id)
    return {"id": request_id, "sections": request.present_keys()}

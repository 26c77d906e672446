"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from src.api.dependencies import get_drafts, get_requests_client
from src.api.request_forms_router import api as request_forms_api
from src.error_handler import ErrorHandler
from src.integrations.contracts.requests import RequestsClient, TransportError
from src.necessitous.request import build_request, require_complete
from src.wizard.steps import parse_steps
from src.wizard.validation import FormValidationError

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Necessitous Supply Requests API",
    description="Collects medical supply requests from a three-step wizard and forwards them to the backend",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handler = ErrorHandler()


class SubmitRequestBody(BaseModel):
    steps: Dict[str, Any] = Field(default_factory=dict, description="Collected wizard steps keyed by step type")


class SubmitResult(BaseModel):
    id: str
    sections: list[str]


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/health", tags=["Health"])
async def health_check(drafts=Depends(get_drafts)):
    return {"status": "healthy", "drafts": drafts.ping(), "timestamp": datetime.now().isoformat()}


@app.post("/api/v1/requests", response_model=SubmitResult, tags=["Requests"])
async def submit_request(body: SubmitRequestBody, client: RequestsClient = Depends(get_requests_client)):
    """Build the compacted request from all collected steps and send it to the backend."""
    try:
        require_complete(body.steps)
        request = build_request(parse_steps(body.steps))
        request_id = await client.send(request)
    except (FormValidationError, ValidationError, TransportError) as e:
        raise error_handler.to_http(e)
    return SubmitResult(id=request_id, sections=request.present_keys())


app.include_router(request_forms_api, prefix="/api/v1")


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Necessitous Supply Requests API...")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Necessitous Supply Requests API...")

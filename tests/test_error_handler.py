import httpx
import pytest
from pydantic import ValidationError

from src.error_handler import ErrorHandler
from src.integrations.contracts.requests import TransportError
from src.necessitous.request import PartialRequestError
from src.wizard.steps import summary_step


def test_partial_request_maps_to_422():
    eh = ErrorHandler()
    out = eh.to_http(PartialRequestError(field_errors={"contact": "contact step is required"}, message="Partial request"))
    assert out.status_code == 422
    assert out.detail["message"] == "Partial request"
    assert out.detail["field_errors"] == {"contact": "contact step is required"}


def test_pydantic_error_maps_to_422_with_field_paths():
    with pytest.raises(ValidationError) as exc:
        summary_step({"comment": ["not", "text"]})
    out = ErrorHandler().to_http(exc.value)
    assert out.status_code == 422
    assert "comment" in out.detail["field_errors"]


def test_transport_error_maps_to_502():
    try:
        raise TransportError() from httpx.ConnectError("refused")
    except TransportError as e:
        out = ErrorHandler().to_http(e)
    assert out.status_code == 502
    assert out.detail == "Failed to send the request"


def test_unexpected_error_maps_to_500():
    out = ErrorHandler().to_http(RuntimeError("boom"))
    assert out.status_code == 500
    assert "internal error" in out.detail.lower()

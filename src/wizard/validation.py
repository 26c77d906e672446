"""Shared validation for wizard form submissions.

The frontend submits each screen as a dictionary. These validators make sure
the mandatory fields of a screen are present and well-formed before a Step is
built from it.

On validation failure, raise `FormValidationError` so the API can return HTTP 422
with structured `field_errors`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass
class FormValidationError(Exception):
    """Raised when a screen or a set of steps cannot be accepted.

    Attributes:
        field_errors: field (or step) name -> what is wrong with it.
        message: summary shown above the form.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _text(payload: Mapping[str, Any], field: str) -> str:
    return str(payload.get(field) or "").strip()


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# field -> label used in "<label> is required"
CONTACT_REQUIRED = {
    "name": "Name",
    "city": "City",
    "street": "Street",
    "building": "Building number",
    "email": "Email",
    "phone": "Phone number",
}
CONTACT_OPTIONAL = ("apartment", "postalCode")


def validate_contact_form(payload: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """
    Contact screen: every CONTACT_REQUIRED field must be filled in and the
    email must look like an address. Optional fields come back as None when blank.
    """
    cleaned: Dict[str, Optional[str]] = {field: _text(payload, field) for field in CONTACT_REQUIRED}
    errors = {field: f"{label} is required" for field, label in CONTACT_REQUIRED.items() if not cleaned[field]}
    if "email" not in errors and not _EMAIL_RE.match(cleaned["email"] or ""):
        errors["email"] = "Email is not valid"
    if errors:
        raise FormValidationError(field_errors=errors, message="Please correct the highlighted fields")

    for field in CONTACT_OPTIONAL:
        cleaned[field] = _text(payload, field) or None
    return cleaned

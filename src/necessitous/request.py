"""
Request builder.

Turns the steps collected by the wizard into one compacted NecessitousRequest:

1. completeness gate: contact, demand and summary must all be present;
2. the contact step is remapped into `medicalCentre`, the summary comment into
   `additionalComment`;
3. every supply category is run through its reducer from CATEGORY_REDUCERS
   (categories the user never submitted are absent without calling a reducer);
4. absent sections are compacted away.

Building is pure: the same steps always give an equal request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from src.necessitous.models import NecessitousRequest
from src.necessitous.reducers import CATEGORY_REDUCERS, additional_comment, medical_centre
from src.wizard.steps import ContactStep, DemandStep, StepDict, StepType, SummaryStep
from src.wizard.validation import FormValidationError

logger = logging.getLogger(__name__)

REQUIRED_STEPS = (StepType.CONTACT, StepType.DEMAND, StepType.SUMMARY)


class PartialRequestError(FormValidationError):
    """Raised when the wizard has not collected all required steps."""


def missing_steps(steps: Mapping[Any, Any]) -> list[StepType]:
    return [step_type for step_type in REQUIRED_STEPS if steps.get(step_type) is None]


def is_complete(steps: Mapping[Any, Any]) -> bool:
    """True iff contact, demand and summary are present. Step contents are not inspected."""
    return not missing_steps(steps)


def require_complete(steps: Mapping[Any, Any]) -> StepDict:
    missing = missing_steps(steps)
    if missing:
        raise PartialRequestError(
            field_errors={step_type.value: f"{step_type.value} step is required" for step_type in missing},
            message="Partial request",
        )
    return {step_type: steps[step_type] for step_type in REQUIRED_STEPS}


def compact(sections: Mapping[str, Optional[Any]]) -> Dict[str, Any]:
    """Drop absent (None) sections, keeping the key order."""
    return {key: value for key, value in sections.items() if value is not None}


def build_request(steps: Mapping[Any, Any]) -> NecessitousRequest:
    """
    Build the compacted request from a (possibly partial) StepDict.

    Raises:
        PartialRequestError: if any of contact, demand or summary is missing.
    """
    complete = require_complete(steps)
    contact: ContactStep = complete[StepType.CONTACT]
    demand: DemandStep = complete[StepType.DEMAND]
    summary: SummaryStep = complete[StepType.SUMMARY]

    sections: Dict[str, Optional[Any]] = {
        "medicalCentre": medical_centre(contact.data),
        "additionalComment": additional_comment(summary.data.comment),
    }

    supplies = demand.data.supplies
    for category, (key, reducer) in CATEGORY_REDUCERS.items():
        submission = supplies.get(category)
        sections[key] = reducer(submission) if submission is not None else None
        if sections[key] is None:
            logger.debug("Omitting %s (submitted=%s)", key, submission is not None)

    request = NecessitousRequest.model_validate(compact(sections))
    logger.info("Built supply request with sections: %s", ", ".join(request.present_keys()))
    return request

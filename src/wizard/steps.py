"""
Wizard steps for the supply request form.

The wizard is linear:
1. contact  (path "1") - legal/contact identity of the medical centre
2. demand   (path "2") - requested supplies per category
3. summary  (path "3") - optional closing comment

Each finished screen becomes a Step; the steps collected so far are kept in a
StepDict keyed by step type.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from src.supplies.catalog import Supplies
from src.wizard.validation import FormValidationError


class StepType(str, Enum):
    CONTACT = "contact"
    DEMAND = "demand"
    SUMMARY = "summary"


class StepPath(str, Enum):
    CONTACT = "1"
    DEMAND = "2"
    SUMMARY = "3"


class ImpossibleStateError(RuntimeError):
    """Navigation was requested past either end of the wizard."""


# ---------------------------------------------------------------------------
# Step payloads
# ---------------------------------------------------------------------------

class ContactData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    city: str
    street: str
    building: str
    apartment: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    email: str
    phone: str


class DemandData(BaseModel):
    model_config = ConfigDict(frozen=True)

    supplies: Supplies = Field(default_factory=Supplies)


class SummaryData(BaseModel):
    model_config = ConfigDict(frozen=True)

    comment: Optional[str] = None


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

class ContactStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["contact"] = "contact"
    path: Literal["1"] = "1"
    data: ContactData


class DemandStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["demand"] = "demand"
    path: Literal["2"] = "2"
    data: DemandData


class SummaryStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["summary"] = "summary"
    path: Literal["3"] = "3"
    data: SummaryData


Step = Annotated[Union[ContactStep, DemandStep, SummaryStep], Field(discriminator="type")]
StepDict = Dict[StepType, Step]

_step_dict_adapter = TypeAdapter(StepDict)


def contact_step(data: Union[ContactData, Mapping[str, Any]]) -> ContactStep:
    return ContactStep(data=ContactData.model_validate(data))


def demand_step(data: Union[DemandData, Mapping[str, Any]]) -> DemandStep:
    return DemandStep(data=DemandData.model_validate(data))


def summary_step(data: Union[SummaryData, Mapping[str, Any]]) -> SummaryStep:
    return SummaryStep(data=SummaryData.model_validate(data))


STEP_FACTORIES = {
    StepType.CONTACT: contact_step,
    StepType.DEMAND: demand_step,
    StepType.SUMMARY: summary_step,
}


def parse_steps(raw: Mapping[str, Any]) -> StepDict:
    """
    Parse a (possibly partial) StepDict from its JSON form.

    Raises pydantic.ValidationError for malformed step data and
    FormValidationError when a step is filed under another step's key.
    """
    steps = _step_dict_adapter.validate_python(dict(raw))
    errors = {
        key.value: f"expected a {key.value} step, got {step.type}"
        for key, step in steps.items()
        if step.type != key.value
    }
    if errors:
        raise FormValidationError(field_errors=errors, message="Steps do not match their keys")
    return steps


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

_NEXT_PATH = {
    StepType.CONTACT: StepPath.DEMAND,
    StepType.DEMAND: StepPath.SUMMARY,
}

_PREV_PATH = {
    StepType.DEMAND: StepPath.CONTACT,
    StepType.SUMMARY: StepPath.DEMAND,
}


def next_path(step: Step) -> StepPath:
    try:
        return _NEXT_PATH[StepType(step.type)]
    except KeyError:
        raise ImpossibleStateError(f"No step follows {step.type}") from None


def prev_path(step: Step) -> StepPath:
    try:
        return _PREV_PATH[StepType(step.type)]
    except KeyError:
        raise ImpossibleStateError(f"No step precedes {step.type}") from None

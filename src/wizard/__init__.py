"""
Wizard layer: the three request screens and their form validation.
"""
from .steps import (
    ContactData,
    ContactStep,
    DemandData,
    DemandStep,
    ImpossibleStateError,
    Step,
    StepDict,
    StepPath,
    StepType,
    SummaryData,
    SummaryStep,
    contact_step,
    demand_step,
    next_path,
    parse_steps,
    prev_path,
    summary_step,
)
from .validation import FormValidationError, validate_contact_form

__all__ = [
    "ContactData", "ContactStep", "DemandData", "DemandStep", "ImpossibleStateError",
    "Step", "StepDict", "StepPath", "StepType", "SummaryData", "SummaryStep",
    "contact_step", "demand_step", "next_path", "parse_steps", "prev_path", "summary_step",
    "FormValidationError", "validate_contact_form",
]

"""
Supply catalogue.

Enumerates the supply categories a medical centre can ask for and the shape of
a single position (line item) inside each of them.

The Demand screen submits, per category, the list of positions plus an
optional free-text description:

    {"Mask": {"positions": [{"type": "medical", "quantity": 100, "style": "FFP2"}],
              "description": "for the ER"}}

Any subset of categories may be missing from the submission.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    MASK = "Mask"
    GLOVE = "Glove"
    GROCERY = "Grocery"
    DISINFECTANT = "Disinfectant"
    SUIT = "Suit"
    CLEANING = "Cleaning"
    PSYCHOLOGICAL_SUPPORT = "PsychologicalSupport"
    SEWING_MATERIAL = "SewingMaterial"
    PRINT = "Print"
    OTHER = "Other"
    TRANSPORT = "Transport"


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------

class _Position(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quantity: int = Field(ge=0)


class MaskPosition(_Position):
    usage_type: str = Field(alias="type")
    style: str


class GlovePosition(_Position):
    material: str
    size: str


class SuitPosition(_Position):
    material: Optional[str] = None
    size: str


class PrintPosition(_Position):
    print_type: str = Field(alias="printType")


class CustomPosition(_Position):
    """Free-entry line used by groceries, disinfectants and cleaning materials."""

    name: str = Field(alias="type")


class DescriptionPosition(BaseModel):
    """Description-only categories never carry meaningful positions."""

    model_config = ConfigDict(frozen=True, extra="allow")


P = TypeVar("P")


class SupplySubmission(BaseModel, Generic[P]):
    model_config = ConfigDict(frozen=True)

    positions: List[P] = Field(default_factory=list)
    description: Optional[str] = None


# ---------------------------------------------------------------------------
# Demand payload
# ---------------------------------------------------------------------------

_FIELD_BY_CATEGORY: Dict[Category, str] = {
    Category.MASK: "mask",
    Category.GLOVE: "glove",
    Category.GROCERY: "grocery",
    Category.DISINFECTANT: "disinfectant",
    Category.SUIT: "suit",
    Category.CLEANING: "cleaning",
    Category.PSYCHOLOGICAL_SUPPORT: "psychological_support",
    Category.SEWING_MATERIAL: "sewing_material",
    Category.PRINT: "print_supply",
    Category.OTHER: "other",
    Category.TRANSPORT: "transport",
}


class Supplies(BaseModel):
    """One independently optional submission per category, keyed by category name. Unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    mask: Optional[SupplySubmission[MaskPosition]] = Field(default=None, alias="Mask")
    glove: Optional[SupplySubmission[GlovePosition]] = Field(default=None, alias="Glove")
    grocery: Optional[SupplySubmission[CustomPosition]] = Field(default=None, alias="Grocery")
    disinfectant: Optional[SupplySubmission[CustomPosition]] = Field(default=None, alias="Disinfectant")
    suit: Optional[SupplySubmission[SuitPosition]] = Field(default=None, alias="Suit")
    cleaning: Optional[SupplySubmission[CustomPosition]] = Field(default=None, alias="Cleaning")
    psychological_support: Optional[SupplySubmission[DescriptionPosition]] = Field(
        default=None, alias="PsychologicalSupport"
    )
    sewing_material: Optional[SupplySubmission[DescriptionPosition]] = Field(default=None, alias="SewingMaterial")
    print_supply: Optional[SupplySubmission[PrintPosition]] = Field(default=None, alias="Print")
    other: Optional[SupplySubmission[DescriptionPosition]] = Field(default=None, alias="Other")
    transport: Optional[SupplySubmission[DescriptionPosition]] = Field(default=None, alias="Transport")

    def get(self, category: Category) -> Optional[SupplySubmission]:
        """Return the submission for `category`, or None if the user supplied nothing."""
        return getattr(self, _FIELD_BY_CATEGORY[Category(category)])

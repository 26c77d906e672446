"""
Per-category reducers.

A reducer decides whether a submitted category belongs in the request and, if
so, reshapes it into its request section. Returning None means "absent".

Two rules exist:
- structured categories keep only positions with quantity > 0 and disappear
  when none are left (a description alone does not keep them in). A blank
  description on a kept section is dropped rather than sent empty;
- description-only categories are present iff their description is not blank.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from src.necessitous.models import (
    CustomRequest,
    CustomRequestPosition,
    DescriptionSection,
    GloveRequest,
    MaskRequest,
    MaskRequestPosition,
    MedicalCentre,
    PrintRequest,
    SuitRequest,
    SupplyRequest,
)
from src.supplies.catalog import Category, CustomPosition, MaskPosition, SupplySubmission
from src.wizard.steps import ContactData

Reducer = Callable[[SupplySubmission], Optional[Any]]


def non_blank(text: Optional[str]) -> Optional[str]:
    """Return `text` unchanged unless it is None, empty or whitespace."""
    if text is None or not text.strip():
        return None
    return text


def description_only(submission: SupplySubmission) -> Optional[DescriptionSection]:
    description = non_blank(submission.description)
    if description is None:
        return None
    return DescriptionSection(description=description)


def structured(section: type, reshape: Callable[[Any], Any] = lambda p: p) -> Reducer:
    """Build a reducer that drops zero-quantity positions, then the whole category if nothing is left."""

    def reduce(submission: SupplySubmission) -> Optional[SupplyRequest]:
        positions = [reshape(p) for p in submission.positions if p.quantity > 0]
        if not positions:
            return None
        return section(positions=positions, description=non_blank(submission.description))

    return reduce


def _mask(position: MaskPosition) -> MaskRequestPosition:
    return MaskRequestPosition(usage_type=position.usage_type, quantity=position.quantity, style=position.style)


def _custom(position: CustomPosition) -> CustomRequestPosition:
    return CustomRequestPosition(quantity=position.quantity, description=position.name)


# category -> (request key, reducer)
CATEGORY_REDUCERS: Dict[Category, Tuple[str, Reducer]] = {
    Category.MASK: ("masks", structured(MaskRequest, _mask)),
    Category.GLOVE: ("gloves", structured(GloveRequest)),
    Category.GROCERY: ("groceries", structured(CustomRequest, _custom)),
    Category.DISINFECTANT: ("disinfectionMeasures", structured(CustomRequest, _custom)),
    Category.SUIT: ("suits", structured(SuitRequest)),
    Category.CLEANING: ("otherCleaningMaterials", structured(CustomRequest, _custom)),
    Category.PSYCHOLOGICAL_SUPPORT: ("psychologicalSupport", description_only),
    Category.SEWING_MATERIAL: ("sewingSupplies", description_only),
    Category.PRINT: ("prints", structured(PrintRequest)),
    Category.OTHER: ("others", description_only),
    Category.TRANSPORT: ("transport", description_only),
}


def medical_centre(contact: ContactData) -> MedicalCentre:
    return MedicalCentre(
        legal_name=contact.name,
        city=contact.city,
        street=contact.street,
        building_number=contact.building,
        apartment_number=contact.apartment,
        postal_code=contact.postal_code,
        email=contact.email,
        phone_number=contact.phone,
    )


def additional_comment(comment: Optional[str]) -> Optional[DescriptionSection]:
    comment = non_blank(comment)
    if comment is None:
        return None
    return DescriptionSection(description=comment)

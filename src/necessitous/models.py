"""
Request contract.

Defines the shape of the supply request sent to the backend `requests`
endpoint. Every section is independently optional: a key is present on the
wire only when its section was supplied and meaningful, it is never sent as
null or as an empty list.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.supplies.catalog import GlovePosition, PrintPosition, SuitPosition


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MedicalCentre(_Section):
    legal_name: str = Field(alias="legalName")
    city: str
    street: str
    building_number: str = Field(alias="buildingNumber")
    apartment_number: Optional[str] = Field(default=None, alias="apartmentNumber")
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    email: str
    phone_number: str = Field(alias="phoneNumber")


class MaskRequestPosition(_Section):
    usage_type: str = Field(alias="usageType")
    quantity: int
    style: str


class CustomRequestPosition(_Section):
    quantity: int
    description: Optional[str] = None


P = TypeVar("P")


class SupplyRequest(_Section, Generic[P]):
    positions: List[P]
    description: Optional[str] = None


class DescriptionSection(_Section):
    description: str


MaskRequest = SupplyRequest[MaskRequestPosition]
GloveRequest = SupplyRequest[GlovePosition]
SuitRequest = SupplyRequest[SuitPosition]
PrintRequest = SupplyRequest[PrintPosition]
CustomRequest = SupplyRequest[CustomRequestPosition]


class NecessitousRequest(_Section):
    """Compacted request: unset sections are dropped from the payload."""

    medical_centre: Optional[MedicalCentre] = Field(default=None, alias="medicalCentre")
    additional_comment: Optional[DescriptionSection] = Field(default=None, alias="additionalComment")
    masks: Optional[MaskRequest] = None
    gloves: Optional[GloveRequest] = None
    groceries: Optional[CustomRequest] = None
    disinfection_measures: Optional[CustomRequest] = Field(
        default=None, alias="disinfectionMeasures"
    )
    suits: Optional[SuitRequest] = None
    other_cleaning_materials: Optional[CustomRequest] = Field(
        default=None, alias="otherCleaningMaterials"
    )
    psychological_support: Optional[DescriptionSection] = Field(default=None, alias="psychologicalSupport")
    sewing_supplies: Optional[DescriptionSection] = Field(default=None, alias="sewingSupplies")
    prints: Optional[PrintRequest] = None
    others: Optional[DescriptionSection] = None
    transport: Optional[DescriptionSection] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the backend, keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def present_keys(self) -> List[str]:
        return list(self.to_payload())


REQUEST_KEYS = [field.alias or name for name, field in NecessitousRequest.model_fields.items()]

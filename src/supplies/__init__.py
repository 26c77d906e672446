"""
Supply catalogue shapes consumed by the request builder.
"""
from .catalog import (
    Category,
    CustomPosition,
    DescriptionPosition,
    GlovePosition,
    MaskPosition,
    PrintPosition,
    SuitPosition,
    Supplies,
    SupplySubmission,
)

__all__ = [
    "Category",
    "CustomPosition",
    "DescriptionPosition",
    "GlovePosition",
    "MaskPosition",
    "PrintPosition",
    "SuitPosition",
    "Supplies",
    "SupplySubmission",
]

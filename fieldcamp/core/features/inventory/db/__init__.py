# (c) Copyright Datacraft, 2026
"""Inventory database models and operations."""

from .orm import (
	OdooProduct,
	CampProductType,
	ProductStorageType,
	UnitFormat,
	CampProduct,
	PurchaseGroup,
	PurchaseDropOffLocation,
	Purchase,
	MaterialUsed,
)

__all__ = [
	"OdooProduct",
	"CampProductType",
	"ProductStorageType",
	"UnitFormat",
	"CampProduct",
	"PurchaseGroup",
	"PurchaseDropOffLocation",
	"Purchase",
	"MaterialUsed",
]

# (c) Copyright Datacraft, 2026
"""Camp products, purchasing and traceable PSE material."""

from .schema import (
	OdooProduct,
	OdooProductCreate,
	OdooProductUpdate,
	CampProductType,
	CampProductTypeCreate,
	CampProductTypeUpdate,
	ProductStorageType,
	ProductStorageTypeCreate,
	ProductStorageTypeUpdate,
	UnitFormat,
	UnitFormatCreate,
	UnitFormatUpdate,
	PurchaseGroup,
	PurchaseGroupCreate,
	PurchaseGroupUpdate,
	PurchaseDropOffLocation,
	PurchaseDropOffLocationCreate,
	PurchaseDropOffLocationUpdate,
	CampProduct,
	CampProductCreate,
	CampProductUpdate,
	Purchase,
	PurchaseCreate,
	PurchaseUpdate,
	MaterialUsed,
	MaterialUsedCreate,
	MaterialUsedUpdate,
)

__all__ = [
	"OdooProduct",
	"OdooProductCreate",
	"OdooProductUpdate",
	"CampProductType",
	"CampProductTypeCreate",
	"CampProductTypeUpdate",
	"ProductStorageType",
	"ProductStorageTypeCreate",
	"ProductStorageTypeUpdate",
	"UnitFormat",
	"UnitFormatCreate",
	"UnitFormatUpdate",
	"PurchaseGroup",
	"PurchaseGroupCreate",
	"PurchaseGroupUpdate",
	"PurchaseDropOffLocation",
	"PurchaseDropOffLocationCreate",
	"PurchaseDropOffLocationUpdate",
	"CampProduct",
	"CampProductCreate",
	"CampProductUpdate",
	"Purchase",
	"PurchaseCreate",
	"PurchaseUpdate",
	"MaterialUsed",
	"MaterialUsedCreate",
	"MaterialUsedUpdate",
]

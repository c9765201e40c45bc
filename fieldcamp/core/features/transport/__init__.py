# (c) Copyright Datacraft, 2026
"""Vehicles, geocoded transport locations and scheduled transportations."""

from .schema import (
	VehicleType,
	VehicleTypeCreate,
	VehicleTypeUpdate,
	AvailableVehicle,
	AvailableVehicleCreate,
	AvailableVehicleUpdate,
	TransportLocation,
	TransportLocationCreate,
	TransportLocationUpdate,
	Transportation,
	TransportationCreate,
	TransportationUpdate,
)

__all__ = [
	"VehicleType",
	"VehicleTypeCreate",
	"VehicleTypeUpdate",
	"AvailableVehicle",
	"AvailableVehicleCreate",
	"AvailableVehicleUpdate",
	"TransportLocation",
	"TransportLocationCreate",
	"TransportLocationUpdate",
	"Transportation",
	"TransportationCreate",
	"TransportationUpdate",
]

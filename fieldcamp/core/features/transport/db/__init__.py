# (c) Copyright Datacraft, 2026
from .orm import VehicleType, AvailableVehicle, TransportLocation, Transportation

__all__ = [
	"VehicleType",
	"AvailableVehicle",
	"TransportLocation",
	"Transportation",
]

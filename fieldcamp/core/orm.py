# (c) Copyright Datacraft, 2026
"""Central ORM model exports.

Importing this module registers every table on ``Base.metadata``; the
migration environment and the schema tests rely on that.
"""
from .features.projects.db.orm import Project
from .features.people.db.orm import Team, Role, CampPerson, CampPersonExtraData
from .features.checklists.db.orm import ChecklistArea, ChecklistTask
from .features.children.db.orm import Child
from .features.transport.db.orm import (
	VehicleType, AvailableVehicle, TransportLocation, Transportation
)
from .features.markets.db.orm import Market
from .features.inventory.db.orm import (
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
from .features.requests.db.orm import RequestType, Request

__all__ = [
	# Geo / project
	'Project',
	# People
	'Team',
	'Role',
	'CampPerson',
	'CampPersonExtraData',
	# Checklists
	'ChecklistArea',
	'ChecklistTask',
	# Children
	'Child',
	# Transport
	'VehicleType',
	'AvailableVehicle',
	'TransportLocation',
	'Transportation',
	# Markets
	'Market',
	# Inventory / purchasing
	'OdooProduct',
	'CampProductType',
	'ProductStorageType',
	'UnitFormat',
	'CampProduct',
	'PurchaseGroup',
	'PurchaseDropOffLocation',
	'Purchase',
	'MaterialUsed',
	# Requests
	'RequestType',
	'Request',
]

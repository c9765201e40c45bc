# (c) Copyright Datacraft, 2026
from .orm import Market

__all__ = [
	"Market",
]

# (c) Copyright Datacraft, 2026
from .orm import Child

__all__ = [
	"Child",
]

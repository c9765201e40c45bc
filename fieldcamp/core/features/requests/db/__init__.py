# (c) Copyright Datacraft, 2026
from .orm import RequestType, Request

__all__ = [
	"RequestType",
	"Request",
]

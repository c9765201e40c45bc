# (c) Copyright Datacraft, 2026
"""Local markets, searchable by distance."""

from .schema import Market, MarketCreate, MarketUpdate

__all__ = [
	"Market",
	"MarketCreate",
	"MarketUpdate",
]

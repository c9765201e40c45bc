# (c) Copyright Datacraft, 2026
from fieldcamp.core.version import __version__

__all__ = ["__version__"]

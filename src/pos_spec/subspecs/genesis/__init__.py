"""Genesis configuration for bootstrapping a chain."""

from .config import GenesisConfig

__all__ = ["GenesisConfig"]

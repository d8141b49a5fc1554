"""Air combat brevity models and natural-language composition for a GCI controller."""

__version__ = "0.1.0"
__all__ = ["bearings", "brevity", "cli", "coalitions", "composer"]
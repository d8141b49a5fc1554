"""Air combat brevity: locations, altitude stacks, groups, requests and calls."""

__all__ = ["calls", "geometry", "group"]
"""enskit — offline ENS name tooling."""

__version__ = "0.3.0"

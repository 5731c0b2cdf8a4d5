"""Highest-label push-relabel maximum flow and minimum cut on directed networks."""

__version__ = "0.1.0"
__all__ = ["cli", "network", "solver"]
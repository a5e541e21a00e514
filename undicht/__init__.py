"""Scene graph, skeletal animation and renderer resource bookkeeping."""

__version__ = "0.1.0"
"""Interactive whole-number calculator that keeps, saves, loads and filters a history of results."""

__version__ = "0.1.0"
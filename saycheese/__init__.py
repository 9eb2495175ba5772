"""SayCheese trending content aggregation."""

__version__ = "0.1.0"

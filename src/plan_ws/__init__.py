"""Trip planning service: request normalization and planner error classification."""

__version__ = "0.1.0"

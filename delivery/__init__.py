"""Courier dispatch domain model, settings loading and a health-check HTTP service."""

__version__ = "0.1.0"
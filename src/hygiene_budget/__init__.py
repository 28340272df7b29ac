"""Hygiene sensor energy budget — battery life from datasheet parameters."""

__version__ = "1.0.0"

"""Compliance report builder: classifies compliance export rows and extracts inline match data."""

__version__ = "0.1.0"

"""Recipe database core: exact units, quantities and recipe summaries."""

__version__ = "0.1.0"

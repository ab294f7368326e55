"""Factories for recipe domain values."""

from .measurement_factory import Measurement, MeasurementFactory, format_measurement, parse_measurement

__all__ = [
    "Measurement",
    "MeasurementFactory",
    "format_measurement",
    "parse_measurement",
]

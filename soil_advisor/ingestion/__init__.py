"""Measurement file import: CSV and JSON parsers producing SoilMeasurement."""

"""Metric collection helpers: enums, records, SQL builders, periods and ids."""

__version__ = "0.1.0"
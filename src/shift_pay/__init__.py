"""Shift pay engine: hourly wage, allowances and flat tax for retail shifts."""

__version__ = "0.1.0"

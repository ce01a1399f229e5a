"""Pharmacy booking slot availability."""

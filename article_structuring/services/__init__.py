"""Structuring, display and article assembly services."""

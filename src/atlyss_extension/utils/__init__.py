"""Utility modules for the ATLYSS extension."""

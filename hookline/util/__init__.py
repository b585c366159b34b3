"""Utility helpers for the hookline core."""

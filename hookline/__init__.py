"""Hookline: simulation core for a single-catch fishing arcade game."""

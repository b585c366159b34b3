"""Configuration package for the hookline game.

Playfield, tier and control constants live in their own modules; the
aggregate dataclasses in game_config.py bundle them for the engine.
"""

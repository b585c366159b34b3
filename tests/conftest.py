"""Pytest configuration and fixtures for hookline tests."""

import random

import pytest

from hookline.entities import Fish


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def engine():
    """An idle engine with a deterministic seed."""
    from hookline.engine import GameEngine

    return GameEngine(seed=42)


@pytest.fixture
def make_fish():
    """Build a fish with sensible defaults; override any field by keyword."""

    def _make(fish_id=0, x=300.0, y=300.0, value=42, direction=1, speed=0.0, tier="mid"):
        return Fish(
            fish_id=fish_id, x=x, y=y, value=value, direction=direction, speed=speed, tier=tier
        )

    return _make


@pytest.fixture
def placed_engine(make_fish):
    """Factory for engines whose fish population is fixed by the test."""
    from hookline.engine import GameEngine

    def _build(*fish, **kwargs):
        return GameEngine(seed=1, fish_factory=lambda rng: list(fish), **kwargs)

    return _build

"""RNG utilities for deterministic simulation.

Generation code takes its RNG explicitly so seeded runs are reproducible;
these helpers fail loudly instead of silently creating an unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the caller - the engine always owns an RNG and
    passes it down.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def generate_fish(rng=None):
            _rng = require_rng_param(rng, "generate_fish")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the engine RNG explicitly.")
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the engine RNG, seeded when a seed is given."""
    return random.Random(seed)

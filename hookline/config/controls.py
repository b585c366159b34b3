"""Input step sizes per control source."""

# One discrete key press moves this far
DISCRETE_STEP = 8.0

# A held (touch / button) control moves this far every tick
CONTINUOUS_STEP = 5.0

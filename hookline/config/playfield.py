"""Playfield bounds shared by the input controller, kinematics and collision code."""

# Horizontal range of the player anchor (and the hook, which follows it)
PLAYER_MIN_X = 20.0
PLAYER_MAX_X = 580.0

# Vertical range of the hook
HOOK_MIN_Y = 100.0
HOOK_MAX_Y = 550.0

# Horizontal lane bounds for fish reflection
FISH_MIN_X = 10.0
FISH_MAX_X = 590.0

# Strict "<" test: a fish exactly this far from the hook is not caught
COLLISION_RADIUS = 15.0

# Where the player stands before the first game
INITIAL_PLAYER_X = 300.0

# Hook depth on start and restart
HOOK_START_Y = 100.0

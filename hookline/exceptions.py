"""Hookline exception hierarchy.

Invalid lifecycle commands are not errors (they are ignored); these classes
cover malformed configuration and malformed external calls.
"""


class HooklineError(Exception):
    """Root of all hookline domain exceptions."""


class SimulationError(HooklineError):
    """Errors during simulation execution (engine, loop, entities)."""


class ConfigurationError(HooklineError):
    """Invalid or missing configuration."""


class CommandError(HooklineError):
    """A command from the presentation layer could not be understood."""

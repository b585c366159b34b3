"""Backend runner package.

- CommandHandlerMixin: command handling for GameRunner (start, restart, input)
"""

from backend.runner.command_handlers import CommandHandlerMixin

__all__ = ["CommandHandlerMixin"]

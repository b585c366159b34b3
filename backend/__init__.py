"""Backend package for the hookline game API.

This package provides the FastAPI web server, WebSocket handling and the
background runner that drives the game loop for remote clients.
"""

__version__ = "1.0.0"

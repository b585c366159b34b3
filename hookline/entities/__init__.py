"""Entity types for the hookline simulation."""

from hookline.entities.fish import Fish, FishView

__all__ = ["Fish", "FishView"]

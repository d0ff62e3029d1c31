"""River agents: hyacinth mats and fish."""

from riverworld.entities.base import Agent, AgentUpdateResult, new_agent_id
from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth, HyacinthView

__all__ = [
    "Agent",
    "AgentUpdateResult",
    "Fish",
    "Hyacinth",
    "HyacinthView",
    "new_agent_id",
]

"""Base entity classes for the simulation."""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from riverworld.math_utils import Vector2


def new_agent_id() -> str:
    """Globally unique, stable identifier for a new agent."""
    return uuid.uuid4().hex


@dataclass
class AgentUpdateResult:
    """What one agent's update produced this tick.

    Attributes:
        spawned: New agents to add when the tick commits
        died: Whether the agent should be removed when the tick commits
        death_cause: Short cause label for statistics and logs
    """

    spawned: List["Agent"] = field(default_factory=list)
    died: bool = False
    death_cause: Optional[str] = None

    @classmethod
    def death(cls, cause: str) -> "AgentUpdateResult":
        return cls(died=True, death_cause=cause)


class Agent:
    """Base class for all river agents (pure logic, no rendering).

    Attributes:
        id: Unique string id, stable for the agent's lifetime
        pos: Centre position in world pixels
        vel: Velocity in pixels per simulated second
        resistance: Flow drag coefficient in [0, 1]; 1 ignores the current
        age: Simulated days alive
    """

    kind = "agent"

    def __init__(
        self,
        x: float,
        y: float,
        resistance: float,
        world_width: float,
        world_height: float,
        agent_id: Optional[str] = None,
    ) -> None:
        self.id: str = agent_id or new_agent_id()
        self.pos: Vector2 = Vector2(x, y)
        self.vel: Vector2 = Vector2(0.0, 0.0)
        self.resistance: float = resistance
        self.age: float = 0.0
        self.world_width = world_width
        self.world_height = world_height

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def keep_in_bounds(self, bounce_damping: float = 0.0) -> bool:
        """Clamp position into the world, reflecting the outward velocity.

        Args:
            bounce_damping: Fraction of the outward speed kept after reflection
                (0 stops the agent at the wall)

        Returns:
            True if the agent touched a wall
        """
        hit = False
        if self.pos.x < 0.0:
            self.pos.x = 0.0
            self.vel.x = abs(self.vel.x) * bounce_damping
            hit = True
        elif self.pos.x > self.world_width:
            self.pos.x = self.world_width
            self.vel.x = -abs(self.vel.x) * bounce_damping
            hit = True

        if self.pos.y < 0.0:
            self.pos.y = 0.0
            self.vel.y = abs(self.vel.y) * bounce_damping
            hit = True
        elif self.pos.y > self.world_height:
            self.pos.y = self.world_height
            self.vel.y = -abs(self.vel.y) * bounce_damping
            hit = True
        return hit

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id[:8]}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}))"

"""Target-seeking movement for fish.

Each fish swims toward a random target, picking a new one when it arrives,
when its countdown runs out, or when it has none. Its own swimming velocity
steers toward the target at a per-target cruising speed and slows inside
the slowdown radius. River flow carries it on top of that, damped by its
resistance. Walls reflect the swimming velocity at half strength.
"""

import random
from typing import TYPE_CHECKING, Optional

from riverworld.config.fish import (
    FISH_BOUNCE_DAMPING,
    FISH_MIN_FACING_SPEED,
    FISH_RETARGET_MAX,
    FISH_RETARGET_MIN,
    FISH_SLOWDOWN_RADIUS,
    FISH_SPEED_FACTOR_MAX,
    FISH_SPEED_FACTOR_MIN,
    FISH_STEERING,
    FISH_TARGET_REACHED_DISTANCE,
)
from riverworld.math_utils import Vector2

if TYPE_CHECKING:
    from riverworld.entities.fish import Fish
    from riverworld.simulation.frame_context import TickContext


class MovementComponent:
    """Per-fish steering state.

    Attributes:
        target: Current destination, or None until the first update
        retarget_timer: Seconds left before a new target is picked
        speed_factor: Fraction of the max speed used for the current target
    """

    __slots__ = ("target", "retarget_timer", "speed_factor")

    def __init__(self) -> None:
        self.target: Optional[Vector2] = None
        self.retarget_timer: float = 0.0
        self.speed_factor: float = FISH_SPEED_FACTOR_MAX

    def needs_target(self, position: Vector2) -> bool:
        if self.target is None or self.retarget_timer <= 0.0:
            return True
        return position.distance_to(self.target) < FISH_TARGET_REACHED_DISTANCE

    def pick_target(self, width: float, height: float, rng: random.Random) -> None:
        self.target = Vector2(rng.uniform(0.0, width), rng.uniform(0.0, height))
        self.retarget_timer = rng.uniform(FISH_RETARGET_MIN, FISH_RETARGET_MAX)
        self.speed_factor = rng.uniform(FISH_SPEED_FACTOR_MIN, FISH_SPEED_FACTOR_MAX)

    def desired_velocity(self, position: Vector2, max_speed: float) -> Vector2:
        """Velocity the fish is steering toward."""
        if self.target is None:
            return Vector2(0.0, 0.0)
        offset = self.target - position
        distance = offset.length()
        if distance == 0.0:
            return Vector2(0.0, 0.0)
        speed = self.speed_factor * max_speed
        if distance < FISH_SLOWDOWN_RADIUS:
            speed *= distance / FISH_SLOWDOWN_RADIUS
        return offset * (speed / distance)

    def update(self, fish: "Fish", ctx: "TickContext") -> None:
        """Integrate one tick of fish motion in place."""
        dt = ctx.dt
        if dt <= 0:
            return
        max_speed = ctx.fish_config.max_speed

        self.retarget_timer -= dt
        if self.needs_target(fish.pos):
            self.pick_target(ctx.world.width, ctx.world.height, ctx.rng)

        steer = (self.desired_velocity(fish.pos, max_speed) - fish.vel) * min(1.0, FISH_STEERING * dt)
        fish.vel.add_inplace(steer)
        fish.vel.limit_inplace(max_speed)

        drift = ctx.river.flow_velocity() * (1.0 - fish.resistance)
        total = fish.vel + drift
        fish.pos.add_inplace(total * dt)
        fish.keep_in_bounds(bounce_damping=FISH_BOUNCE_DAMPING)

        if total.length() > FISH_MIN_FACING_SPEED:
            fish.orientation = total.angle()

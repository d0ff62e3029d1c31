"""Movement rules for floating hyacinth mats.

Plants have no will of their own: they drift with the current, push each
other apart when crowded and are held loosely near their parent. Forces are
accelerations in px/s^2, integrated with the scaled delta:

- drift: flow velocity damped by ``1 - resistance``
- repulsion: quadratic soft push from every snapshot plant inside the
  comfort radius
- tether: linear pull toward a living parent beyond the tether length

Velocity is then damped, speed-capped and integrated; walls stop the plant.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from riverworld.config.display import FRAME_RATE
from riverworld.config.hyacinth import (
    HYACINTH_COMFORT_RADIUS,
    HYACINTH_DAMPING,
    HYACINTH_MAX_SPEED,
    HYACINTH_MAX_TETHER,
    HYACINTH_REPULSION_STRENGTH,
    HYACINTH_TETHER_STRENGTH,
)
from riverworld.math_utils import Vector2

if TYPE_CHECKING:
    from riverworld.entities.hyacinth import Hyacinth, HyacinthView
    from riverworld.river import River
    from riverworld.simulation.frame_context import TickContext


def flow_drift(river: "River", resistance: float) -> Vector2:
    """Flow acceleration felt by a body with the given resistance."""
    return river.flow_velocity() * (1.0 - resistance)


def repulsion_force(
    plant_id: str, position: Vector2, neighbours: Iterable["HyacinthView"]
) -> Vector2:
    """Summed quadratic push away from plants closer than the comfort radius."""
    force = Vector2(0.0, 0.0)
    comfort_sq = HYACINTH_COMFORT_RADIUS * HYACINTH_COMFORT_RADIUS
    for other in neighbours:
        if other.id == plant_id:
            continue
        dx = position.x - other.x
        dy = position.y - other.y
        dist_sq = dx * dx + dy * dy
        if dist_sq >= comfort_sq:
            continue
        if dist_sq == 0.0:
            # Coincident centres: push along +x so the pair separates
            force.x += HYACINTH_REPULSION_STRENGTH
            continue
        dist = dist_sq**0.5
        overlap = 1.0 - dist / HYACINTH_COMFORT_RADIUS
        magnitude = HYACINTH_REPULSION_STRENGTH * overlap * overlap
        force.x += dx / dist * magnitude
        force.y += dy / dist * magnitude
    return force


def tether_force(position: Vector2, parent: Optional["HyacinthView"]) -> Vector2:
    """Pull toward the parent once the plant strays past the tether length."""
    if parent is None:
        return Vector2(0.0, 0.0)
    dx = parent.x - position.x
    dy = parent.y - position.y
    dist = (dx * dx + dy * dy) ** 0.5
    if dist <= HYACINTH_MAX_TETHER:
        return Vector2(0.0, 0.0)
    magnitude = HYACINTH_TETHER_STRENGTH * (dist - HYACINTH_MAX_TETHER)
    return Vector2(dx / dist * magnitude, dy / dist * magnitude)


def damping_factor(dt: float) -> float:
    """Velocity retained over ``dt`` seconds (``HYACINTH_DAMPING`` per reference frame)."""
    return HYACINTH_DAMPING ** (dt * FRAME_RATE)


def move(plant: "Hyacinth", ctx: "TickContext") -> None:
    """Integrate one tick of plant motion in place."""
    dt = ctx.dt
    if dt <= 0:
        return

    parent_view = ctx.plant_index.get(plant.parent) if plant.parent else None

    acceleration = flow_drift(ctx.river, plant.resistance)
    acceleration.add_inplace(repulsion_force(plant.id, plant.pos, ctx.plant_snapshot))
    acceleration.add_inplace(tether_force(plant.pos, parent_view))

    plant.vel.add_inplace(acceleration * dt)
    plant.vel.mul_inplace(damping_factor(dt))
    plant.vel.limit_inplace(HYACINTH_MAX_SPEED)

    plant.pos.add_inplace(plant.vel * dt)
    plant.keep_in_bounds(bounce_damping=0.0)

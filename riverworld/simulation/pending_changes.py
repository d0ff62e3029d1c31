"""Births and deaths recorded during one tick's agent sweep.

No agent joins or leaves a population while the sweep runs. The update
systems record a Birth for each daughter or fry and a Death for each agent
that died; ``PopulationManager.commit`` applies the deaths, then the births.
Each record carries the agent's species, so the commit never inspects types.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from riverworld.entities.base import Agent


@dataclass(frozen=True)
class Birth:
    """A new agent waiting to join its population.

    Attributes:
        agent: The newborn
        species: ``agent.kind`` at the time of birth
        parent_id: Id of the budding plant, or None
    """

    agent: "Agent"
    species: str
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class Death:
    """A live agent to be removed at commit."""

    agent_id: str
    species: str
    cause: str


class PendingChanges:
    """One tick's births and deaths, in the order they were recorded."""

    def __init__(self) -> None:
        self._births: Dict[str, Birth] = {}
        self._deaths: Dict[str, Death] = {}

    def record_birth(self, agent: "Agent", parent_id: Optional[str] = None) -> bool:
        """Queue a newborn; False if it is already queued either way."""
        if agent.id in self._births or agent.id in self._deaths:
            return False
        self._births[agent.id] = Birth(agent, agent.kind, parent_id)
        return True

    def record_death(self, agent: "Agent", cause: str) -> bool:
        """Queue a death; False if the agent is already dying this tick.

        A newborn that dies before commit never joins its population.
        """
        if agent.id in self._deaths:
            return False
        self._births.pop(agent.id, None)
        self._deaths[agent.id] = Death(agent.id, agent.kind, cause)
        return True

    def take(self) -> Tuple[List[Death], List[Birth]]:
        """Return (deaths, births) and empty the record."""
        deaths = list(self._deaths.values())
        births = list(self._births.values())
        self.discard()
        return deaths, births

    def discard(self) -> None:
        self._births.clear()
        self._deaths.clear()

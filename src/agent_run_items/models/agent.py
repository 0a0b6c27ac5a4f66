"""
Agent references held by run items.

Run items point at the agent that produced them but never own it. Anything
exposing ``name`` and ``to_json()`` can be used; ``Agent`` is the minimal
concrete reference, and ``AgentRegistry`` resolves serialized agent summaries
back to live instances.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from agent_run_items.exceptions import AgentNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class AgentReference(Protocol):
    """What a run item needs from an agent."""
    name: str

    def to_json(self) -> dict[str, Any]: ...


@dataclass(eq=False)
class Agent:
    """
    Minimal agent handle.

    Identity-compared: two agents with the same name are still distinct
    instances. ``to_json`` only summarizes the agent itself so serialized
    items stay acyclic.
    """
    name: str
    instructions: str = ""
    handoff_description: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name}


class AgentRegistry:
    """Name-keyed lookup of agents, used when rebuilding serialized items."""

    def __init__(self, agents: list[AgentReference] | None = None):
        self._agents: dict[str, AgentReference] = {}
        for agent in agents or []:
            self.register(agent)

    def register(self, agent: AgentReference) -> AgentReference:
        """Register an agent under its name. Re-registering the same instance is a no-op."""
        existing = self._agents.get(agent.name)
        if existing is not None and existing is not agent:
            raise ValueError(f"An agent named '{agent.name}' is already registered")
        self._agents[agent.name] = agent
        logger.debug(f"Registered agent '{agent.name}' (registry_size: {len(self._agents)})")
        return agent

    def get(self, name: str) -> AgentReference | None:
        return self._agents.get(name)

    def resolve(self, data: Any) -> AgentReference:
        """
        Resolve a serialized agent reference.

        Accepts either the agent's ``to_json()`` output or a bare name.

        Raises:
            AgentNotFoundError: If no registered agent matches.
        """
        if isinstance(data, Mapping):
            name = data.get("name")
        elif isinstance(data, str):
            name = data
        else:
            name = None

        agent = self._agents.get(name) if isinstance(name, str) else None
        if agent is None:
            raise AgentNotFoundError(name, available=self.names)
        return agent

    @property
    def names(self) -> list[str]:
        return list(self._agents.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

"""
Exception hierarchy for the run-item model.

Item construction, the reasoning sanitizer and the text utilities never raise.
These errors only surface when rebuilding items from serialized traces or when
registering agents.
"""


class RunItemError(Exception):
    """Base exception for all run-item errors."""
    pass


class MalformedRunItemError(RunItemError):
    """A serialized run item is missing required fields or has the wrong shape."""
    def __init__(self, message: str, item_type: str | None = None):
        self.item_type = item_type
        super().__init__(message)


class UnknownRunItemTypeError(MalformedRunItemError):
    """A serialized run item carries a discriminant that no variant handles."""
    def __init__(self, item_type: str | None):
        super().__init__(f"Unknown run item type: {item_type!r}", item_type=item_type)


class AgentNotFoundError(RunItemError):
    """An agent referenced by a serialized run item is not registered."""
    def __init__(self, agent_name: str | None, available: list[str] | None = None):
        self.agent_name = agent_name
        self.available = available or []
        super().__init__(
            f"Agent '{agent_name}' not found. Available: {self.available}"
        )

"""Shared type aliases and the exceptions raised by the ECS."""

Entity = int
"""Identifier of a spawned entity."""

ComponentID = int
"""Identifier assigned to a registered component type."""

Signature = frozenset[ComponentID]
"""Set of component IDs attached to an entity or required by a system."""


class EcsError(Exception):
    """Base class for every error raised by the ECS."""


class NotRegisteredError(EcsError, LookupError):
    """A component or system type was used before it was registered."""


class DuplicateRegistrationError(EcsError):
    """A component or system type was registered more than once."""


class MissingEntityError(EcsError, LookupError):
    """The entity does not exist."""


class MissingComponentError(EcsError, LookupError):
    """The entity does not carry the requested component."""


class DuplicateComponentError(EcsError):
    """The entity already carries a component of this type."""
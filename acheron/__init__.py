"""A small entity-component-system framework with staged systems, singletons and modules."""

__version__ = "0.1.0"
__all__ = ["component", "component_array", "entity", "examples", "system", "types", "world"]
"""Named-binding dependency injection container.

This package maps names to construction recipes or fixed values and resolves
them into wired object graphs. Dependencies declared against a base class with
`Container.bind_all` are inherited by every binding whose target derives from
it, and cycles are rejected when bindings are made rather than when they are
resolved.

Exports:
- `Container`: Main DI container with `bind`, `bind_all`, `resolve` and the
  optional process-wide `Container.shared` handle.
- `Lifetime`: Enum for controlling object lifetimes (singleton or transient).
- `Binding`, `Dependency`: Records describing a registration.
- `ancestry`: The ancestor relation used to order inherited dependencies.
- `ContainerError`, `BindingError`, `CircularReferenceError`, `ResolutionError`:
  Failures raised by the container.
"""

from ._binding import Binding, Dependency, Lifetime, ancestry
from ._container import Container
from ._errors import BindingError, CircularReferenceError, ContainerError, ResolutionError


__all__ = [
    "Binding",
    "BindingError",
    "CircularReferenceError",
    "Container",
    "ContainerError",
    "Dependency",
    "Lifetime",
    "ResolutionError",
    "ancestry",
]

from __future__ import annotations


class ContainerError(Exception):
    """Base class for failures raised by the container itself."""


class BindingError(ContainerError):
    """Raised for a structurally valid but disallowed binding configuration."""

    default_message = "Invalid binding configuration encountered"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CircularReferenceError(ContainerError):
    """Raised when a binding or an extension would close a dependency cycle.

    `name` is the binding name for `bind`, or the base class for `bind_all`.
    """

    def __init__(self, name: object) -> None:
        self.name = name
        label = getattr(name, "__qualname__", name)
        super().__init__(f"Circular dependency detected for {label}")


class ResolutionError(ContainerError, KeyError):
    """Raised when a name, directly or transitively, has no binding.

    Also a ``KeyError`` so lookups can be handled like a mapping miss.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No binding registered for name: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


class Lifetime(Enum):
    SINGLETON = "singleton"
    TRANSIENT = "transient"


class _Empty:
    def __repr__(self) -> str:
        return "<empty>"


# cache slot marker; a recipe may legitimately produce None
EMPTY: Any = _Empty()


@dataclass(frozen=True)
class Dependency:
    """One injected dependency.

    Attributes:
        key: Key under which the resolved object is placed in the dependency dict.
        binding: Name of the binding that supplies it.
    """

    key: str
    binding: str


@dataclass
class Binding:
    target: Callable[..., object] | None
    instance: object = EMPTY  # cached singleton, or the fixed value
    lifetime: Lifetime | None = Lifetime.SINGLETON
    dependencies: list[Dependency] = field(default_factory=list)
    params: tuple[Any, ...] = ()
    chain: list[type] = field(default_factory=list)

    @classmethod
    def value(cls, instance: object) -> Binding:
        return cls(target=None, instance=instance, lifetime=None)

    @property
    def is_recipe(self) -> bool:
        return self.target is not None

    @property
    def has_instance(self) -> bool:
        return self.instance is not EMPTY


def ancestry(target: object) -> tuple[Any, ...]:
    """Ordered ancestors of a constructible target, the target itself first.

    Classes report their method resolution order. Any other callable only
    descends from itself.

    Example:
        >>> class Foo: ...
        >>> class Bar(Foo): ...
        >>> ancestry(Bar)  # (Bar, Foo, object)
    """
    if inspect.isclass(target):
        return inspect.getmro(target)
    return (target,)

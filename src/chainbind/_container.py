from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from ._binding import Binding, Dependency, Lifetime, ancestry
from ._errors import CircularReferenceError, ResolutionError
from ._validation import check_base, check_extension, check_name, check_options, check_target


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


class _SharedSlot(type):
    """Metaclass holding the process-wide `Container.shared` handle."""

    _shared: Container | None = None

    @property
    def shared(cls) -> Container | None:
        return _SharedSlot._shared

    @shared.setter
    def shared(cls, value: Container | None) -> None:
        if value is not None and not isinstance(value, Container):
            msg = f"Container.shared must be None or a Container instance, got {type(value).__name__}"
            raise TypeError(msg)
        _SharedSlot._shared = value


class Container(metaclass=_SharedSlot):
    """Named-binding DI container.

    - bind names to constructible targets or to fixed values
    - declare extension dependencies on base classes with `bind_all`
    - lifetimes: singleton / transient
    - bind-time cycle detection, including inherited extensions.

    `Container.shared` is an optional process-wide handle. It starts as None
    and is only ever set explicitly.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}
        self._extensions: dict[type, list[Dependency]] = {}
        self._lock = threading.RLock()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._bindings

    def bind(
        self,
        name: str,
        target: Callable[..., object] | object,
        *,
        lifetime: Lifetime | str | None = None,
        dependencies: Mapping[str, str] | None = None,
        params: Sequence[Any] | None = None,
    ) -> Container:
        """Bind a name to a constructible target or to a fixed value.

        Callable targets are recipes: `resolve` calls them with `params` first,
        then a dict of resolved dependencies when there is at least one. Any
        other target is returned verbatim. Binding an existing name replaces it.

        Example:
          container.bind("url", "postgres://localhost")
          container.bind("db", Database, dependencies={"url": "url"})
          container.bind("request", Request, lifetime=Lifetime.TRANSIENT, params=[30])

        """
        check_name(name)
        check_target(target)
        normalized = check_options(target, lifetime=lifetime, dependencies=dependencies, params=params)

        if not callable(target):
            with self._lock:
                self._bindings[name] = Binding.value(target)
            logger.debug("Bound %r to value of type %s", name, type(target).__name__)
            return self

        binding = Binding(
            target=target,
            lifetime=normalized or Lifetime.SINGLETON,
            dependencies=[Dependency(key, bound) for key, bound in (dependencies or {}).items()],
            params=tuple(params or ()),
        )

        with self._lock:
            order = ancestry(target)
            for base in self._extensions:
                if base in order:
                    _link(binding.chain, base, order)

            if self._is_circular(name, self._full_dependency_set(binding)):
                logger.warning("Rejected binding %r: circular dependency", name)
                raise CircularReferenceError(name)

            self._bindings[name] = binding

        logger.debug("Bound %r to %s (%s, chain=%s)", name, _label(target), binding.lifetime.value, binding.chain)
        return self

    def bind_all(self, base: type, dependencies: Mapping[str, str]) -> Container:
        """Give every binding whose target is-or-derives-from `base` extra dependencies.

        A binding's own dependencies win over extension entries with the same key,
        and nearer base classes win over farther ones. The call is all-or-nothing:
        if the new entries would close a cycle, nothing changes.
        """
        check_base(base)
        check_extension(dependencies)

        extension = [Dependency(key, bound) for key, bound in dependencies.items()]

        with self._lock:
            previous = self._extensions.get(base)
            impacted: list[tuple[str, Binding]] = []
            linked: list[Binding] = []

            for name, binding in self._bindings.items():
                if not binding.is_recipe:
                    continue

                order = ancestry(binding.target)
                if base not in order:
                    continue

                if _link(binding.chain, base, order):
                    linked.append(binding)
                impacted.append((name, binding))

            self._extensions[base] = extension

            for name, binding in impacted:
                if not self._is_circular(name, self._full_dependency_set(binding)):
                    continue

                if previous is None:
                    del self._extensions[base]
                else:
                    self._extensions[base] = previous
                for reverted in linked:
                    reverted.chain.remove(base)

                logger.warning("Rejected extension of %s: circular dependency through %r", _label(base), name)
                raise CircularReferenceError(base)

        logger.debug("Extended %s with %s (%d bindings impacted)", _label(base), extension, len(impacted))
        return self

    def resolve(self, name: str) -> object:
        """Resolve the name to an instance.

        - Fixed values and cached singletons are returned as they are.
        - Otherwise dependencies are resolved recursively: own entries first,
          then extension entries along the chain, nearest base first.
        - Singletons are cached on their binding; transients never are.
        """
        if not isinstance(name, str):
            msg = f"The name must be a string, got {type(name).__name__}"
            raise TypeError(msg)

        with self._lock:
            binding = self._bindings.get(name)
            if binding is None:
                raise ResolutionError(name)

            if binding.has_instance:
                return binding.instance

            resolved: dict[str, object] = {}

            for dep in binding.dependencies:
                resolved[dep.key] = self.resolve(dep.binding)

            for base in binding.chain:
                for dep in self._extensions.get(base, ()):
                    if dep.key in resolved:
                        continue
                    resolved[dep.key] = self.resolve(dep.binding)

            instance = self._construct(name, binding, resolved)

            if binding.lifetime is Lifetime.TRANSIENT:
                return instance

            binding.instance = instance
            return instance

    def chain(self, name: str) -> tuple[type, ...]:
        """Base classes contributing extension dependencies to `name`, nearest first."""
        if not isinstance(name, str):
            msg = f"The name must be a string, got {type(name).__name__}"
            raise TypeError(msg)

        with self._lock:
            binding = self._bindings.get(name)
            if binding is None:
                raise ResolutionError(name)
            return tuple(binding.chain)

    def _construct(self, name: str, binding: Binding, resolved: dict[str, object]) -> object:
        args = list(binding.params)
        if resolved:
            args.append(resolved)

        logger.debug("Constructing %r via %s with %d positional args", name, _label(binding.target), len(args))
        return binding.target(*args)  # type: ignore[misc]

    def _full_dependency_set(self, binding: Binding) -> set[str]:
        """Bound names a binding needs: its own plus those inherited along its chain."""
        names = {dep.binding for dep in binding.dependencies}

        for base in binding.chain:
            names.update(dep.binding for dep in self._extensions.get(base, ()))

        return names

    def _is_circular(self, name: str, dependencies: set[str], visited: set[str] | None = None) -> bool:
        if name in dependencies:
            return True

        if visited is None:
            visited = set()

        for dep in dependencies:
            if dep in visited:
                continue
            visited.add(dep)

            # unbound names are leaves until resolution
            upstream = self._bindings.get(dep)
            if upstream is None or not upstream.is_recipe:
                continue

            if self._is_circular(name, self._full_dependency_set(upstream), visited):
                return True

        return False


def _link(chain: list[type], base: type, order: tuple[Any, ...]) -> bool:
    """Insert `base` into `chain` at its ancestor-ordered position.

    `order` is the ancestry of the binding's target, nearest first. Returns
    False when `base` is already linked.
    """
    if base in chain:
        return False

    rank = order.index(base)
    for i, link in enumerate(chain):
        if order.index(link) > rank:
            chain.insert(i, base)
            return True

    chain.append(base)
    return True


def _label(target: object) -> str:
    return getattr(target, "__qualname__", repr(target))

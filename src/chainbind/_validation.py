"""Argument checks run by the container before it touches any state."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence

from ._binding import Lifetime
from ._errors import BindingError


def check_name(name: object) -> None:
    if not isinstance(name, str):
        msg = f"The name must be a string, got {type(name).__name__}"
        raise TypeError(msg)
    if not name:
        msg = "The name must be a non-empty string"
        raise ValueError(msg)


def check_target(target: object) -> None:
    if target is None:
        msg = "The target cannot be None"
        raise TypeError(msg)


def check_params(is_recipe: bool, params: object) -> None:  # noqa: FBT001
    if params is None:
        return

    if isinstance(params, (str, bytes)) or not isinstance(params, Sequence):
        msg = "The params option must be a list or tuple"
        raise TypeError(msg)

    if not is_recipe:
        msg = "Params can only be used with constructible targets"
        raise BindingError(msg)


def check_lifetime(is_recipe: bool, lifetime: object) -> Lifetime | None:  # noqa: FBT001
    """Validate the lifetime option and normalize it to a `Lifetime` member."""
    if lifetime is None:
        return None

    try:
        normalized = Lifetime(lifetime)
    except ValueError:
        msg = f'Lifetime must be "singleton" or "transient", got {lifetime!r}'
        raise TypeError(msg) from None

    if not is_recipe:
        msg = "Lifetime can only be used with constructible targets"
        raise BindingError(msg)

    return normalized


def check_dependency_map(dependencies: object, *, option: bool) -> None:
    """Shape check shared by the `dependencies` option and `bind_all`."""
    label = "The dependencies option" if option else "The dependencies argument"

    if dependencies is None:
        msg = f"{label} cannot be None"
        raise TypeError(msg)

    if not isinstance(dependencies, Mapping):
        msg = f"{label} must be a mapping, got {type(dependencies).__name__}"
        raise TypeError(msg)

    for key, bound in dependencies.items():
        if not isinstance(key, str) or not isinstance(bound, str):
            msg = f"{label} must map string keys to binding names, got {key!r}: {bound!r}"
            raise TypeError(msg)


def check_dependencies(is_recipe: bool, dependencies: object) -> None:  # noqa: FBT001
    if dependencies is None:
        return

    check_dependency_map(dependencies, option=True)

    if not is_recipe:
        msg = "Dependencies can only be used with constructible targets"
        raise BindingError(msg)


def check_options(
    target: object,
    *,
    lifetime: object = None,
    dependencies: object = None,
    params: object = None,
) -> Lifetime | None:
    """Validate the options of a `bind` call; return the normalized lifetime, if any."""
    is_recipe = callable(target)

    check_params(is_recipe, params)
    normalized = check_lifetime(is_recipe, lifetime)
    check_dependencies(is_recipe, dependencies)

    return normalized


def check_base(base: object) -> None:
    if not inspect.isclass(base):
        msg = f"The base must be a class, got {base!r}"
        raise TypeError(msg)


def check_extension(dependencies: object) -> None:
    check_dependency_map(dependencies, option=False)

    if len(dependencies) == 0:  # type: ignore[arg-type]
        msg = "The dependencies argument must have at least one key"
        raise TypeError(msg)

"""Base class for controllers generated from blueprints."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional

from .blueprint import Blueprint
from .errors import FactoryError


class Controller:
    """Attribute bag bound to a UI element and optionally a model.

    Subclasses are generated by ``ControllerFactory.make``; each carries its
    blueprint and the build pipeline as class attributes. Calling a subclass
    with ``(options, *init_args)`` runs the pipeline on the new instance.

    After construction ``el`` holds the raw element and ``wrapped`` the
    queryable collection it came from.
    """

    blueprint: ClassVar[Blueprint] = Blueprint()
    builder: ClassVar[Optional[Callable[..., Any]]] = None

    def __init__(self, options: Any = None, *args: Any) -> None:
        builder = type(self).builder
        if builder is None:
            raise FactoryError(
                "UNBOUND_CONTROLLER",
                f"{type(self).__name__} was not created by a controller factory.",
            )
        builder(self, type(self).blueprint, options, args)

    def attributes(self) -> Dict[str, Any]:
        """Snapshot of the instance attributes set during construction."""
        return dict(vars(self))

    def __repr__(self) -> str:
        name = type(self).blueprint.name
        label = repr(name) if name else "anonymous"
        return f"<{type(self).__name__} {label} el={vars(self).get('el')!r}>"


__all__ = ["Controller"]

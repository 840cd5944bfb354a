"""fabui: blueprint-based construction of UI controllers.

Register a blueprint with :func:`make` and build controllers from it by
name with :func:`construct`::

    import fabui

    fabui.make("counter", {
        "count": 0,
        "init": lambda self, start=0: setattr(self, "count", start),
        "events": {"click .increment": lambda self, event: setattr(self, "count", self.count + 1)},
    })
    counter = fabui.construct("counter", {"el": "#counter"}, 5)
"""

from fabui.app.factory import ControllerFactory
from fabui.app.runtime import configure, construct, constructed, default_factory, make
from fabui.app.settings import FactoryConfig
from fabui.domain.controller import Controller
from fabui.domain.errors import FactoryError

__version__ = "1.0.0"

__all__ = [
    "Controller",
    "ControllerFactory",
    "FactoryConfig",
    "FactoryError",
    "configure",
    "construct",
    "constructed",
    "default_factory",
    "make",
    "__version__",
]

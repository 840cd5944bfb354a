from __future__ import annotations

from typing import Any, Optional, Tuple

from fabui.adapters.dom_memory import MemoryDom, MemoryElement
from fabui.adapters.model_pydantic import PydanticModels
from fabui.app.factory import ControllerFactory
from fabui.app.settings import FactoryConfig


def make_factory(
    *,
    models: bool = True,
    config: Optional[FactoryConfig] = None,
) -> Tuple[ControllerFactory, MemoryDom]:
    dom = MemoryDom()
    factory = ControllerFactory(
        dom,
        model_port=PydanticModels() if models else None,
        config=config or FactoryConfig(track_instances="strong"),
    )
    return factory, dom


def add_widget(dom: MemoryDom, widget_id: str = "widget", buttons: int = 1) -> MemoryElement:
    """Attach ``<div id=widget_id>`` with ``buttons`` ``button.btn`` children to the document."""
    widget = dom.document.append(MemoryElement("div", id=widget_id))
    for index in range(buttons):
        widget.append(MemoryElement("button", classes=["btn"], attrs={"data-index": str(index)}))
    return widget


def record_calls(log: list) -> Any:
    def callback(controller: Any, *event_args: Any) -> None:
        log.append((controller, event_args))

    return callback


__all__ = ["add_widget", "make_factory", "record_calls"]

"""Model port backed by pydantic model classes.

Raw controller data (a plain mapping without a recognized guid) becomes a
generated :class:`ControllerModel` subclass whose fields default to the
data values; every instance gets a fresh UUID4 ``guid``.
"""

from __future__ import annotations

import keyword
import logging
import re
from typing import Any, Dict, Mapping, Optional, Set, Tuple, Type
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, create_model

from fabui.domain.naming import class_name_for
from fabui.domain.ports import ModelPort

GUID_FIELD = "guid"
_NON_WORD = re.compile(r"\W+")


def new_guid() -> str:
    return str(uuid4())


class ControllerModel(BaseModel):
    """Base class for generated controller models."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=False,
        populate_by_name=True,
    )

    guid: str = Field(default_factory=new_guid)


class PydanticModels(ModelPort):
    def __init__(self, base: Type[ControllerModel] = ControllerModel) -> None:
        self._log = logging.getLogger(__name__)
        self._base = base

    def validate_guid(self, value: Any) -> bool:
        if isinstance(value, UUID):
            return True
        if not isinstance(value, str) or not value.strip():
            return False
        try:
            UUID(value.strip())
        except ValueError:
            return False
        return True

    def make(self, data: Mapping[str, Any], name: Optional[str] = None) -> Type[ControllerModel]:
        """Build a model class whose fields default to ``data``.

        Keys that cannot be attribute names (``"first name"``, ``"class"``,
        ``"_id"``) or that would shadow ``BaseModel`` members (``"schema"``,
        ``"copy"``) get a sanitized field name and keep the original key as
        alias, so ``model_dump(by_alias=True)`` returns the caller's keys. A
        stale ``guid`` is replaced by a fresh one.
        """
        keys = [str(raw_key) for raw_key in data.keys()]
        taken = {key for key in keys if self._usable_field(key)}
        fields: Dict[str, Tuple[Any, Any]] = {}
        for raw_key, value in data.items():
            key = str(raw_key)
            if key == GUID_FIELD:
                continue
            if key in taken:
                fields[key] = (Any, value)
                continue
            field_name = self._field_name_for(key, taken)
            taken.add(field_name)
            self._log.debug("Storing model key %r as field %r", key, field_name)
            fields[field_name] = (Any, Field(default=value, alias=key))
        model_name = class_name_for(name, suffix="Model", fallback="Controller")
        return create_model(model_name, __base__=self._base, **fields)

    def _usable_field(self, key: str) -> bool:
        if key == GUID_FIELD:
            return False
        if not key.isidentifier() or keyword.iskeyword(key) or key.startswith("_"):
            return False
        return not hasattr(self._base, key)

    def _field_name_for(self, key: str, taken: Set[str]) -> str:
        candidate = _NON_WORD.sub("_", key).strip("_") or "field"
        if candidate[0].isdigit():
            candidate = f"field_{candidate}"
        while candidate in taken or not self._usable_field(candidate):
            candidate += "_"
        return candidate


__all__ = ["ControllerModel", "GUID_FIELD", "PydanticModels", "new_guid"]

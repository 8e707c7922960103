"""Base model and enum for WMATA API responses.

Every WMATA response model inherits from :class:`WmataBaseModel` which
provides:

* ``alias_generator=to_pascal`` so PascalCase element names map
  automatically to snake_case fields.
* :meth:`WmataBaseModel.from_xml`, the decode capability used by the
  generic decoder: the element's children are flattened into a dict
  (nested elements become nested dicts) and validated into a fresh,
  frozen instance.
* A ``model_validator(mode="before")`` that drops empty and ``nil``
  values so the field default is used.
* A ``raw`` dict that captures the decoded element.
"""

from __future__ import annotations

import enum
from typing import Any, Self
from xml.etree import ElementTree

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

_XSI_NIL = "{http://www.w3.org/2001/XMLSchema-instance}nil"


def element_to_dict(element: ElementTree.Element, namespace: str) -> dict[str, Any]:
    """Flatten the children of *element* into a dict keyed by local name.

    Only children in *namespace* are considered.  Leaf children map to
    their stripped text (``None`` when empty or ``xsi:nil``); children with
    sub-elements map to a nested dict.  When a name repeats, the values are
    collected into a list.
    """
    prefix = f"{{{namespace}}}" if namespace else ""
    values: dict[str, Any] = {}
    for child in element:
        tag = child.tag
        if not isinstance(tag, str):
            continue
        if prefix:
            if not tag.startswith(prefix):
                continue
            name = tag[len(prefix) :]
        elif tag.startswith("{"):
            continue
        else:
            name = tag

        value: Any
        if len(child):
            value = element_to_dict(child, namespace)
        elif child.get(_XSI_NIL) == "true":
            value = None
        else:
            value = (child.text or "").strip() or None

        if name in values:
            existing = values[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                values[name] = [existing, value]
        else:
            values[name] = value
    return values


class WmataEnum(enum.StrEnum):
    """Base for WMATA code enums.

    Every subclass **must** define ``UNKNOWN``.  Codes the API sends that
    have no mapped member resolve to ``UNKNOWN`` instead of raising
    ``ValueError``.
    """

    @classmethod
    def _missing_(cls, value: object) -> WmataEnum:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().upper():
                    return member
        if hasattr(cls, "UNKNOWN"):
            unknown: WmataEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class LineCode(WmataEnum):
    """Metrorail line codes.  ``ALL`` is a query-only value."""

    RED = "RD"
    BLUE = "BL"
    YELLOW = "YL"
    ORANGE = "OR"
    GREEN = "GR"
    SILVER = "SV"
    ALL = "ALL"
    UNKNOWN = "UNKNOWN"


class WmataBaseModel(BaseModel):
    """Base for WMATA API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Element contents as decoded from the response document."""

    @classmethod
    def from_xml(cls, element: ElementTree.Element, namespace: str) -> Self:
        """Build a new instance from *element*; the element is not modified."""
        return cls.model_validate(element_to_dict(element, namespace))

    @model_validator(mode="before")
    @classmethod
    def _clean_wmata_values(cls, values: Any) -> Any:
        """Drop empty values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None and value != ""}
        # Only auto-stash raw when not explicitly provided.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned

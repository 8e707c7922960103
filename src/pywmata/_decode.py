"""Generic XML document decoding.

Maps a parsed response document onto :class:`Decodable` model types.  The
root element's namespace is shared by every lookup below it.

* :func:`decode_one` decodes the root element into a single value.
* :func:`decode_many` decodes the immediate children of *every* element
  named ``child_name`` (the root included) into one flat list, so a list
  that the server nests inside an extra wrapper is still found.

A missing document or root yields ``None`` rather than an error.  An item
whose values cannot be decoded fails the whole call with
:class:`WmataDecodeError`; no partial lists are returned.
"""

from __future__ import annotations

import logging
from typing import Protocol, TypeVar
from xml.etree import ElementTree

from pydantic import ValidationError

from pywmata.exceptions import WmataDecodeError

_logger = logging.getLogger(__name__)

D = TypeVar("D", bound="Decodable")


class Decodable(Protocol):
    """Capability every domain type exposes to the generic decoder."""

    @classmethod
    def from_xml(cls: type[D], element: ElementTree.Element, namespace: str) -> D:
        ...


def namespace_of(element: ElementTree.Element) -> str:
    """Return the namespace URI of *element* (``""`` when unqualified)."""
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1 : tag.index("}")]
    return ""


def qualify(name: str, namespace: str) -> str:
    return f"{{{namespace}}}{name}" if namespace else name


def _root_of(doc: ElementTree.ElementTree | None) -> ElementTree.Element | None:
    if doc is None:
        return None
    return doc.getroot()


def _decode_item(model: type[D], element: ElementTree.Element, namespace: str, index: int | None = None) -> D:
    try:
        return model.from_xml(element, namespace)
    except (ValidationError, ValueError) as exc:
        where = f" item {index}" if index is not None else ""
        raise WmataDecodeError(
            f"Could not decode {model.__name__}{where}: {exc}",
            model=model.__name__,
            index=index,
        ) from exc


def decode_one(doc: ElementTree.ElementTree | None, model: type[D]) -> D | None:
    """Decode the document root into a fresh *model* instance."""
    root = _root_of(doc)
    if root is None:
        return None
    return _decode_item(model, root, namespace_of(root))


def decode_many(doc: ElementTree.ElementTree | None, model: type[D], child_name: str) -> list[D] | None:
    """Decode every item under every ``child_name`` container, in document order."""
    root = _root_of(doc)
    if root is None:
        return None
    namespace = namespace_of(root)

    items: list[D] = []
    containers = list(root.iter(qualify(child_name, namespace)))
    for container in containers:
        for element in container:
            if not isinstance(element.tag, str):
                # comments and processing instructions
                continue
            items.append(_decode_item(model, element, namespace, len(items)))

    if len(containers) > 1:
        _logger.debug("Flattened %d <%s> containers into %d items", len(containers), child_name, len(items))
    return items

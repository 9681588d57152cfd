"""Document facade: replace an element of an ElementTree document with a pattern.

The target is either an ``Element`` or a selector resolved inside ``root``.
A selector is ``#id`` or any ElementPath expression. A target that cannot be
resolved makes ``update`` a silent no-op. An invalid hash still raises.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET

from identipattern.engine.constants import DEFAULT_SIZE
from identipattern.engine.hash_bytes import validate_hash
from identipattern.errors import TargetNotFoundError
from identipattern.facades.svg import to_svg

logger = logging.getLogger(__name__)

HASH_ATTR = "data-identipattern-hash"


def resolve_target(target: str | ET.Element, root: ET.Element | None = None) -> ET.Element:
    if isinstance(target, ET.Element):
        return target
    if root is None:
        raise TargetNotFoundError(f"No document to resolve {target!r} in")

    if target.startswith("#"):
        wanted = target[1:]
        found = next((el for el in root.iter() if el.get("id") == wanted), None)
    else:
        found = root.find(target)
    if found is None:
        raise TargetNotFoundError(f"No element matches {target!r}")
    return found


def element_size(el: ET.Element) -> float:
    """Size from ``width`` (else ``height``); 120 when missing, zero, non-finite or unparseable."""
    raw = el.get("width") or el.get("height")
    if not raw:
        return DEFAULT_SIZE
    try:
        size = float(raw)
    except ValueError:
        return DEFAULT_SIZE
    return size if size and math.isfinite(size) else DEFAULT_SIZE


def replace_element(el: ET.Element, replacement: ET.Element) -> None:
    """Swap ``el``'s tag, attributes and children in place, keeping its tail text."""
    tail = el.tail
    el.clear()
    el.tag = replacement.tag
    el.attrib.update(replacement.attrib)
    el.text = replacement.text
    el.extend(list(replacement))
    el.tail = tail


def update(
    target: str | ET.Element,
    hash_hex: str | None = None,
    show_grid: bool = False,
    root: ET.Element | None = None,
) -> None:
    try:
        el = resolve_target(target, root)
    except TargetNotFoundError as e:
        logger.debug("update skipped: %s", e)
        return

    h = hash_hex if hash_hex is not None else el.get(HASH_ATTR, "")
    validate_hash(h)

    svg = to_svg(h, element_size(el), show_grid=bool(show_grid))
    replace_element(el, ET.fromstring(svg))

"""
CSS selector execution against a parsed tree.

Selectors are evaluated by soupsieve (through BeautifulSoup), which covers
CSS level 1-4 selectors: type, class, id and attribute selectors with all
operators, the descendant, child, sibling and ``|`` namespace combinators,
``:not()``, ``:is()``, ``:where()``, ``:has()``, the ``:nth-*`` and
``*-of-type`` families, ``:root``, ``:empty``, ``:checked`` and the
``:-soup-contains()`` text matcher.
"""

from __future__ import annotations

from typing import List

import soupsieve
from bs4 import BeautifulSoup
from bs4.element import Tag

from ragloader.exceptions import SelectorSyntaxError

from .models import ExtractedSegment, SelectionResult
from .parser import source_position
from .text import to_text


def validate_selector(selector: str) -> None:
    """Compile ``selector`` once so syntax errors surface at configuration time."""
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorSyntaxError(selector, str(e)) from e


def execute_selector(tree: BeautifulSoup, selector: str, multiple: bool) -> SelectionResult:
    """
    Apply one selector to ``tree``.

    Args:
        tree: Parsed document
        selector: CSS selector
        multiple: Extract every match in document order instead of the first

    Returns:
        SelectionResult; ``matched`` is False when nothing was found

    Raises:
        SelectorSyntaxError: If ``selector`` is not valid CSS
    """
    try:
        if multiple:
            elements: List[Tag] = tree.select(selector)
        else:
            element = tree.select_one(selector)
            elements = [element] if element is not None else []
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorSyntaxError(selector, str(e)) from e

    segments = tuple(
        ExtractedSegment(content=to_text(element), selector=selector, position=source_position(element))
        for element in elements
    )
    return SelectionResult(segments=segments, matched=bool(segments))

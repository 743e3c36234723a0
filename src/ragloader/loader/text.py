"""
Rendered-text derivation for matched elements.

Approximates the ``innerText`` algorithm: non-rendering subtrees are
skipped, inline whitespace collapses, and block boundaries become line
breaks (two around paragraphs). Runs without mutating the tree.
"""

from __future__ import annotations

import re
from typing import List, Tuple, Union

from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

NON_RENDERING_ELEMENTS = frozenset(
    {
        "base",
        "canvas",
        "datalist",
        "embed",
        "head",
        "iframe",
        "input",
        "link",
        "math",
        "meta",
        "noscript",
        "object",
        "script",
        "select",
        "style",
        "svg",
        "template",
        "textarea",
        "title",
    }
)

BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "caption",
        "center",
        "dd",
        "details",
        "dialog",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "html",
        "legend",
        "li",
        "listing",
        "main",
        "menu",
        "nav",
        "ol",
        "optgroup",
        "option",
        "plaintext",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "tfoot",
        "thead",
        "tr",
        "ul",
        "xmp",
    }
)

PREFORMATTED_ELEMENTS = frozenset({"listing", "plaintext", "pre", "textarea"})
TABLE_CELLS = ("td", "th")

_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_WHITESPACE = re.compile(r"[ \t\n\r\f]+")

# A required line-break count, or a text run flagged as literal (kept verbatim)
_Item = Union[int, Tuple[str, bool]]


class _Emit:
    __slots__ = ("item",)

    def __init__(self, item: _Item) -> None:
        self.item = item


def _is_rendered(tag: Tag) -> bool:
    name = (tag.name or "").lower()
    if name in NON_RENDERING_ELEMENTS:
        return False
    if tag.has_attr("hidden"):
        return False
    if name == "dialog" and not tag.has_attr("open"):
        return False
    return True


def _required_breaks(name: str) -> int:
    if name == "p":
        return 2
    if name in BLOCK_ELEMENTS:
        return 1
    return 0


def _collect(root: Tag) -> List[_Item]:
    items: List[_Item] = []
    root_pre = any((parent.name or "").lower() in PREFORMATTED_ELEMENTS for parent in [root, *root.parents])
    stack: List[Tuple[object, bool]] = [(child, root_pre) for child in reversed(root.contents)]

    while stack:
        node, pre = stack.pop()

        if isinstance(node, _Emit):
            items.append(node.item)
            continue

        if isinstance(node, NavigableString):
            if isinstance(node, _SKIPPED_STRINGS):
                continue
            text = str(node)
            items.append((text, True) if pre else (_WHITESPACE.sub(" ", text), False))
            continue

        if not isinstance(node, Tag) or not _is_rendered(node):
            continue

        name = (node.name or "").lower()
        if name == "br":
            items.append(("\n", True))
            continue

        breaks = _required_breaks(name)
        child_pre = pre or name in PREFORMATTED_ELEMENTS

        # Pushed in reverse: closing markers first, then children
        if breaks:
            stack.append((_Emit(breaks), pre))
        if name in TABLE_CELLS and node.find_next_sibling(list(TABLE_CELLS)) is not None:
            stack.append((_Emit(("\t", True)), pre))
        stack.extend((child, child_pre) for child in reversed(node.contents))
        if breaks:
            items.append(breaks)

    return items


def _trim_trailing_spaces(out: List[str]) -> None:
    while out and out[-1].endswith(" "):
        out[-1] = out[-1].rstrip(" ")
        if not out[-1]:
            out.pop()


def _assemble(items: List[_Item]) -> str:
    out: List[str] = []
    pending = 0
    at_line_start = True

    for item in items:
        if isinstance(item, int):
            # Breaks before any text are dropped, adjacent ones collapse to the largest
            if out:
                pending = max(pending, item)
            continue

        text, literal = item
        # Collapsible spaces never start a line or follow another space
        if not literal and (pending or at_line_start or (out and out[-1].endswith(" "))):
            text = text.lstrip(" ")
        if not text:
            continue

        if pending:
            _trim_trailing_spaces(out)
            out.append("\n" * pending)
            pending = 0
        elif literal and text.startswith("\n"):
            _trim_trailing_spaces(out)

        out.append(text)
        at_line_start = text.endswith("\n")

    return "".join(out).strip()


def to_text(element: Tag) -> str:
    """
    Plain text of ``element`` as a renderer would show it.

    A non-rendering element selected directly (``title``, ``script``, ...)
    yields its whitespace-collapsed text content instead.
    """
    if (element.name or "").lower() in NON_RENDERING_ELEMENTS:
        return _WHITESPACE.sub(" ", element.get_text()).strip()
    return _assemble(_collect(element))

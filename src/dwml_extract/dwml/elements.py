"""
Element lookup helpers over lxml trees.

Lookups by tag name match the local name in any namespace (or none), search
descendants in document order and never match the element itself.
"""

from typing import Iterator, Optional

from lxml import etree


def any_namespace(tag: str) -> str:
    return f"{{*}}{tag}"


def descendants(element: etree._Element, tag: str) -> Iterator[etree._Element]:
    return element.iterdescendants(any_namespace(tag))


def first_descendant(element: etree._Element, tag: str) -> Optional[etree._Element]:
    return next(descendants(element, tag), None)


def first_in_tree(element: etree._Element, tag: str) -> Optional[etree._Element]:
    """First element named tag, the element itself included."""
    return next(element.iter(any_namespace(tag)), None)


def first_text(element: etree._Element, tag: str) -> Optional[str]:
    """Text of the first descendant named tag, or None."""
    found = first_descendant(element, tag)
    return found.text if found is not None else None


def child_elements(element: etree._Element) -> Iterator[etree._Element]:
    """Direct element children, skipping comments and processing instructions."""
    for child in element:
        if isinstance(child.tag, str):
            yield child


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname

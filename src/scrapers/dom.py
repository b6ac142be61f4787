# src/scrapers/dom.py

"""Small query helpers over parsed markup.

Missing nodes and attributes always collapse to ``""`` so extractors can
treat every field as optional.
"""

from bs4 import BeautifulSoup, Tag

Node = BeautifulSoup | Tag


def select_text(root: Node | None, selector: str) -> str:
    """Concatenated, stripped text of every node matching *selector*."""
    if root is None or not selector:
        return ""
    return "".join(n.get_text() for n in root.select(selector)).strip()


def first_text(root: Node | None, selector: str) -> str:
    """Stripped text of the first node matching *selector*."""
    if root is None or not selector:
        return ""
    node = root.select_one(selector)
    return node.get_text().strip() if node is not None else ""


def attr(node: Tag | None, name: str) -> str:
    """String value of attribute *name*, or ``""`` when missing."""
    if node is None or not name:
        return ""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def has_match(root: Node | None, selector: str) -> bool:
    """Presence check for a marker element."""
    if root is None or not selector:
        return False
    return root.select_one(selector) is not None


def inner_html(node: Tag | None) -> str:
    """Serialised children of *node*, without the node's own tag."""
    if node is None:
        return ""
    return node.decode_contents()

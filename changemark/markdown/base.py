"""Base utilities for the markdown renderer.

Contains small helpers shared by the rendering stages:
- group_by: Partition items by a key, keeping input order
- uniq: Drop duplicates, keeping first occurrences
- upper_first: Upper-case only the first character
- format_name: Normalize an author name for the contributors list
"""

from typing import Callable, Hashable, Iterable, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by key.

    Args:
        items: Items to group.
        key: Function extracting the group key from an item.

    Returns:
        Mapping of key to the items with that key, in input order.
        Keys appear in the order they were first seen.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def uniq(items: Iterable[T]) -> list[T]:
    """Remove duplicates while keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def upper_first(text: str) -> str:
    """Upper-case the first character, leaving the rest unchanged.

    Examples:
        "add endpoint" -> "Add endpoint"
        "iOS support" -> "IOS support"
    """
    if text == "":
        return ""
    return text[0].upper() + text[1:]


def format_name(name: Optional[str]) -> str:
    """Normalize an author name.

    Splits on single spaces, trims each part and upper-cases its first
    character, then joins the parts back with single spaces.

    Examples:
        "jane doe" -> "Jane Doe"
        "bob" -> "Bob"
    """
    if name is None:
        return ""
    return " ".join(upper_first(part.strip()) for part in name.split(" "))

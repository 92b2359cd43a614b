r""" CSS selector parts
https://www.w3.org/TR/selectors-4/#compound

References:
    - [type selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/Type_selectors)
    - [attribute selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/Attribute_selectors)
    - [pseudo classes](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-classes)
    - [pseudo elements](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-elements)
    - [combinators](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors/Combinators)

element#id.class[attr]:pseudo-class::pseudo-element
          \----/\----/\----------/
          Can be several occurrences

compound => parts in the order above, element/id/pseudo-element at most once,
complex => <compound/> <combinator/> <compound/>,
combinator => ` `, `>`, `+`, `~`,
"""
from __future__ import annotations
from enum import Enum
from functools import cache
from typing import Literal
from typing_extensions import TypeAliasType

__all__ = [
    "Category",
    "CombinatorFormat",
    "FRAGMENTS",
    "COMBINATORS",
    "DESCENDANT",
    "CHILD",
    "NEXT_SIBLING",
    "SUBSEQUENT_SIBLING",
]

DESCENDANT = " "
CHILD = ">"
NEXT_SIBLING = "+"
SUBSEQUENT_SIBLING = "~"

COMBINATORS = (DESCENDANT, CHILD, NEXT_SIBLING, SUBSEQUENT_SIBLING)

CombinatorFormat = TypeAliasType(
    "CombinatorFormat",
    Literal[" ", ">", "+", "~"] | str,
)


class Category(Enum):
    """Kind of a compound selector part. The value is its required position."""

    Element = 1
    Id = 2
    Class = 3
    Attribute = 4
    PseudoClass = 5
    PseudoElement = 6

    def __lt__(self, other: Category) -> bool:
        if isinstance(other, Category):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other: Category) -> bool:
        if isinstance(other, Category):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other: Category) -> bool:
        if isinstance(other, Category):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other: Category) -> bool:
        if isinstance(other, Category):
            return self.value >= other.value
        return NotImplemented

    @staticmethod
    @cache
    def singletons() -> frozenset[Category]:
        """Categories that may occur at most once in a compound selector."""
        return frozenset({Category.Element, Category.Id, Category.PseudoElement})

    @property
    def singleton(self) -> bool:
        return self in Category.singletons()

    def wrap(self, value: str) -> str:
        """Render `value` as a fragment of this category, e.g. `[href]` for an attribute."""
        prefix, suffix = FRAGMENTS[self]
        return f"{prefix}{value}{suffix}"


# Prefix and suffix placed around the raw value of each part
FRAGMENTS: dict[Category, tuple[str, str]] = {
    Category.Element: ("", ""),
    Category.Id: ("#", ""),
    Category.Class: (".", ""),
    Category.Attribute: ("[", "]"),
    Category.PseudoClass: (":", ""),
    Category.PseudoElement: ("::", ""),
}

from cssbuilder.parts import (
    CHILD,
    COMBINATORS,
    DESCENDANT,
    NEXT_SIBLING,
    SUBSEQUENT_SIBLING,
    Category,
    CombinatorFormat,
)
from cssbuilder.selector import (
    DuplicateSingletonPart,
    OutOfOrderPart,
    SelectorBuilder,
    SelectorError,
    builder,
    combine,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "CombinatorFormat",
    "COMBINATORS",
    "DESCENDANT",
    "CHILD",
    "NEXT_SIBLING",
    "SUBSEQUENT_SIBLING",
    "SelectorBuilder",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "builder",
    "combine",
]

""" CSS selector builder
https://www.w3.org/TR/selectors-4/#structure

Each compound selector is built by chaining calls on the `builder` factory.
Every call returns a new selector; the one it was called on is left untouched.

    builder.id('main').class_('container').class_('editable').stringify()
        => '#main.container.editable'

    builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
        => 'a[href$=".png"]:focus'

Compound selectors are joined into complex selectors with `combine`.
"""

from __future__ import annotations
import logging
from cssbuilder.parts import Category, CombinatorFormat

__all__ = [
    "SelectorBuilder",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "builder",
    "combine",
]

log = logging.getLogger(__name__)

class SelectorError(Exception): pass

class DuplicateSingletonPart(SelectorError):
    def __init__(self, message: str = "Element, id and pseudo-element should not occur more then one time inside the selector"):
        super().__init__(message)

class OutOfOrderPart(SelectorError):
    def __init__(self, message: str = "Selector parts should be arranged in the following order: element, id, class, attribute, pseudo-class, pseudo-element"):
        super().__init__(message)


class SelectorBuilder:
    """An immutable, partially built CSS selector.

    Args
        text (str): The rendered selector so far. Defaults to `''` (empty str)
        last (Category | None): Category of the most recently appended part.
        categories (frozenset[Category]): Categories present in the current compound selector.
    """

    __slots__ = ("_text_", "_last_", "_categories_")

    def __init__(
        self,
        text: str = "",
        last: Category | None = None,
        categories: frozenset[Category] = frozenset(),
    ) -> None:
        self._text_ = text
        self._last_ = last
        self._categories_ = categories

    @property
    def text(self) -> str:
        return self._text_

    @property
    def last(self) -> Category | None:
        return self._last_

    @property
    def categories(self) -> frozenset[Category]:
        return self._categories_

    def element(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.Element, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.Id, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.Class, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.Attribute, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.PseudoClass, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._derive_(Category.PseudoElement, value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: CombinatorFormat,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with a combinator, e.g. `div#main + table#data`.

        The result starts a new compound selector, so it carries no part history.
        """
        return SelectorBuilder(f"{left.stringify()} {combinator} {right.stringify()}")

    def stringify(self) -> str:
        return self._text_

    def validate(self, category: Category):
        """Check that a part of `category` may be appended to this selector.

        Raises
            DuplicateSingletonPart: An element, id, or pseudo-element is already present.
            OutOfOrderPart: A part of a later category has already been appended.
        """
        # Singletons are checked against every part of the compound, not only the last one
        if category.singleton and category in self._categories_:
            raise DuplicateSingletonPart
        if self._last_ is not None and category < self._last_:
            raise OutOfOrderPart

    def _derive_(self, category: Category, value: str) -> SelectorBuilder:
        try:
            self.validate(category)
        except SelectorError:
            log.debug("rejected %s part %r after %r", category.name, value, self._text_)
            raise

        return SelectorBuilder(
            self._text_ + category.wrap(value),
            category,
            self._categories_ | {category},
        )

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, SelectorBuilder):
            return (
                self._text_ == __value._text_
                and self._last_ == __value._last_
                and self._categories_ == __value._categories_
            )
        return False

    def __hash__(self) -> int:
        return hash((self._text_, self._last_, self._categories_))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._text_!r})"

    def __str__(self) -> str:
        return self._text_


builder = SelectorBuilder()
"""Empty selector every other selector is derived from."""

def combine(left: SelectorBuilder, combinator: CombinatorFormat, right: SelectorBuilder) -> SelectorBuilder:
    return builder.combine(left, combinator, right)


if __name__ == "__main__":
    print(
        combine(
            builder.element('div').id('main').class_('container').class_('draggable'),
            '+',
            combine(
                builder.element('table').id('data'),
                '~',
                combine(
                    builder.element('tr').pseudo_class('nth-of-type(even)'),
                    ' ',
                    builder.element('td').pseudo_class('nth-of-type(even)'),
                ),
            ),
        ).stringify()
    )

"""Property values that are either known now or resolved later by the build graph."""

from __future__ import annotations

from typing import Annotated, Callable, List, Literal, Union

from pydantic import Field

from .utils import FrozenModel, NonEmptyString

LIST_SEPARATOR = ";"
"""Separator of list items inside a resolved property value."""

GENERATOR_EXPRESSION_MARKER = "$<"
"""Manual values containing this marker are treated as deferred expressions."""

Resolver = Callable[[str], str]
"""Generation-time evaluation of a deferred expression into its (list-valued) text."""


class LiteralValue(FrozenModel):
    """A property value that is fully known at aggregation time."""

    kind: Literal["literal"] = "literal"
    value: str
    """The concrete value. May hold several ``;``-separated items."""

    def resolve(self, resolver: Resolver) -> str:
        return self.value


class DeferredValue(FrozenModel):
    """A property value that only the host build graph can resolve, at generation time.

    The expression is carried verbatim through aggregation and composition. Forcing it
    earlier would bake stale paths (e.g. the final location of a library) into the artifacts.
    """

    kind: Literal["deferred"] = "deferred"
    expression: NonEmptyString
    """The opaque expression, e.g. ``$<TARGET_FILE:foo>``."""

    def resolve(self, resolver: Resolver) -> str:
        return resolver(self.expression)


ResolvedProperty = Annotated[Union[LiteralValue, DeferredValue], Field(discriminator="kind")]
"""Tagged union of literal and deferred property values."""


def parse_property(value: str) -> Union[LiteralValue, DeferredValue]:
    """Wrap a manually supplied value, detecting generator expressions.

    Parameters
    ----------
    value : str
        The raw option value.

    Returns
    -------
    Union[LiteralValue, DeferredValue]
        A deferred value if ``value`` contains a generator expression, a literal otherwise.
    """
    if GENERATOR_EXPRESSION_MARKER in value:
        return DeferredValue(expression=value)
    return LiteralValue(value=value)


def flatten(text: str) -> List[str]:
    """Split a resolved value into its list items, dropping empty items.

    This is the join-then-split step: an empty value yields no items at all instead of a
    single empty string.
    """
    return [item for item in text.split(LIST_SEPARATOR) if item]


def resolve_items(prop: Union[LiteralValue, DeferredValue], resolver: Resolver) -> List[str]:
    """Resolve a property and flatten it into list items."""
    return flatten(prop.resolve(resolver))

"""Deferred text artifacts, rendered only once deferred values can be resolved."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, List, Literal, Tuple, Union

from pydantic import Field

from xeus_cling_setup.data import (
    KernelManifest,
    ResolvedProperty,
    Resolver,
    resolve_items,
    to_json,
    write_text_if_changed,
)
from xeus_cling_setup.data.utils import FrozenModel


class TextFragment(FrozenModel):
    """A fixed piece of output."""

    kind: Literal["text"] = "text"
    text: str

    def expand(self, resolver: Resolver) -> List[str]:
        return [self.text]


class EachFragment(FrozenModel):
    """A template instantiated once per item of a (possibly deferred) list value.

    A value that resolves to nothing produces no output at all, so an empty include
    directory never turns into an empty directive.
    """

    kind: Literal["each"] = "each"
    value: ResolvedProperty
    """The value to expand."""
    template: str
    """Output per item; ``{item}`` is replaced by the item."""

    def expand(self, resolver: Resolver) -> List[str]:
        return [self.template.format(item=item) for item in resolve_items(self.value, resolver)]


Fragment = Annotated[Union[TextFragment, EachFragment], Field(discriminator="kind")]


class DeferredText(FrozenModel):
    """Plain text made of fragments, concatenated at render time."""

    kind: Literal["text"] = "text"
    fragments: Tuple[Fragment, ...] = ()

    def render(self, resolver: Resolver) -> str:
        return "".join(piece for f in self.fragments for piece in f.expand(resolver))


class DeferredManifest(FrozenModel):
    """A kernel manifest whose argument list still contains deferred values.

    Every fragment of ``argv`` expands into separate arguments, so each compile flag and
    definition ends up as its own JSON string.
    """

    kind: Literal["manifest"] = "manifest"
    display_name: str
    argv: Tuple[Fragment, ...]
    language: str

    def resolve(self, resolver: Resolver) -> KernelManifest:
        argv = [arg for f in self.argv for arg in f.expand(resolver)]
        return KernelManifest(display_name=self.display_name, argv=argv, language=self.language)

    def render(self, resolver: Resolver) -> str:
        return to_json(self.resolve(resolver))


class GeneratedArtifact(FrozenModel):
    """A generated file: its destination and its not yet resolved content."""

    path: Path
    """Absolute destination inside the build output directory."""
    content: Annotated[Union[DeferredText, DeferredManifest], Field(discriminator="kind")]

    def render(self, resolver: Resolver) -> str:
        return self.content.render(resolver)


class RenderedArtifact(FrozenModel):
    """An artifact whose content is final."""

    path: Path
    text: str

    def write(self) -> bool:
        """Write the artifact, leaving an identical existing file untouched."""
        return write_text_if_changed(self.path, self.text)


def render_all(artifacts: List[GeneratedArtifact], resolver: Resolver) -> List[RenderedArtifact]:
    """Render every artifact before any of them is written.

    A resolution failure therefore leaves all destinations untouched.
    """
    return [RenderedArtifact(path=a.path, text=a.render(resolver)) for a in artifacts]

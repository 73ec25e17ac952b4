"""In-process build graph described by static target descriptions."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from pydantic import Field

from xeus_cling_setup.data import TargetKind
from xeus_cling_setup.data.property import LIST_SEPARATOR
from xeus_cling_setup.data.utils import FrozenModel, NonEmptyString
from xeus_cling_setup.errors import GraphError

from .graph import BuildGraph

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(r"\$<([A-Z_]+):([^$<>]*)>")
"""An innermost generator expression: ``$<NAME:argument>`` without nested expressions."""


class TargetDescription(FrozenModel):
    """Static description of one target."""

    name: NonEmptyString
    """The target name."""
    kind: TargetKind = TargetKind.SHARED_LIBRARY
    """The target kind."""
    cxx_standard: Optional[int] = None
    """The CXX_STANDARD property of the target, if set."""
    file: Optional[str] = None
    """Location of the built artifact. Defaults to ``lib<name>.so`` in the build directory."""
    include_directories: Tuple[str, ...] = ()
    """Interface include directories. May contain generator expressions."""
    compile_flags: Tuple[str, ...] = ()
    """Interface compile flags."""
    compile_definitions: Tuple[str, ...] = ()
    """Interface compile definitions."""
    link_libraries: Tuple[str, ...] = Field(default=())
    """Targets whose interface properties propagate to this one."""


class StaticBuildGraph(BuildGraph):
    """A :class:`BuildGraph` over a fixed set of target descriptions.

    It evaluates the expressions the engine produces (``$<TARGET_PROPERTY:t,P>`` and
    ``$<TARGET_FILE:t>``) as well as ``$<BUILD_INTERFACE:...>`` and
    ``$<INSTALL_INTERFACE:...>`` wrappers found in include directories. Interface properties
    are transitive over ``link_libraries``, collected depth-first with every target visited
    once.

    Examples
    --------
    >>> graph = StaticBuildGraph.from_dicts(
    ...     [{"name": "adder", "include_directories": ["/src/include"]}], binary_dir="/build"
    ... )
    >>> graph.evaluate("$<TARGET_FILE:adder>")
    '/build/libadder.so'
    """

    def __init__(self, targets: Iterable[TargetDescription], binary_dir: Path) -> None:
        self._targets: Dict[str, TargetDescription] = {}
        for target in targets:
            if target.name in self._targets:
                raise GraphError(f"Duplicate target '{target.name}' in build graph")
            self._targets[target.name] = target
        self._binary_dir = Path(binary_dir).resolve()

    @classmethod
    def from_dicts(cls, targets: Iterable[dict], binary_dir: Path) -> "StaticBuildGraph":
        return cls([TargetDescription.model_validate(t) for t in targets], Path(binary_dir))

    def has_target(self, name: str) -> bool:
        return name in self._targets

    def target_kind(self, name: str) -> TargetKind:
        return self._get(name).kind

    def target_cxx_standard(self, name: str) -> Optional[int]:
        return self._get(name).cxx_standard

    def evaluate(self, expression: str) -> str:
        text = expression
        while True:
            match = _EXPRESSION.search(text)
            if match is None:
                break
            value = self._evaluate_one(match.group(1), match.group(2))
            text = text[: match.start()] + value + text[match.end() :]
        if "$<" in text:
            raise GraphError(f"Malformed generator expression: {expression}")
        return text

    def _get(self, name: str) -> TargetDescription:
        try:
            return self._targets[name]
        except KeyError:
            raise GraphError(f"Target '{name}' does not exist in the build graph") from None

    def _evaluate_one(self, name: str, argument: str) -> str:
        if name == "TARGET_FILE":
            return self._artifact_path(self._get(argument))
        if name == "TARGET_PROPERTY":
            target, _, prop = argument.partition(",")
            if not prop:
                raise GraphError(f"TARGET_PROPERTY expects 'target,property', got '{argument}'")
            return LIST_SEPARATOR.join(self._property(self._get(target), prop))
        if name == "BUILD_INTERFACE":
            return argument
        if name == "INSTALL_INTERFACE":
            return ""
        raise GraphError(f"Unsupported generator expression: $<{name}:...>")

    def _artifact_path(self, target: TargetDescription) -> str:
        if target.file:
            return target.file
        return str(self._binary_dir / f"lib{target.name}.so")

    def _property(self, target: TargetDescription, prop: str) -> List[str]:
        interface_getters: Dict[str, Callable[[TargetDescription], Tuple[str, ...]]] = {
            "INTERFACE_INCLUDE_DIRECTORIES": lambda t: t.include_directories,
            "INTERFACE_COMPILE_FLAGS": lambda t: t.compile_flags,
            "INTERFACE_COMPILE_OPTIONS": lambda t: t.compile_flags,
            "INTERFACE_COMPILE_DEFINITIONS": lambda t: t.compile_definitions,
        }
        if prop in interface_getters:
            getter = interface_getters[prop]
            return [value for t in self._closure(target) for value in getter(t)]
        if prop == "TYPE":
            return [target.kind.value]
        if prop == "CXX_STANDARD":
            return [str(target.cxx_standard)] if target.cxx_standard is not None else []
        logger.debug("Property %s of target %s is not set", prop, target.name)
        return []

    def _closure(self, target: TargetDescription) -> List[TargetDescription]:
        """The target followed by its transitive link dependencies, depth-first."""
        seen = set()
        order: List[TargetDescription] = []

        def visit(t: TargetDescription) -> None:
            if t.name in seen:
                return
            seen.add(t.name)
            order.append(t)
            for dep in t.link_libraries:
                # Plain library names that are not targets (e.g. "m") carry no interface.
                if dep in self._targets:
                    visit(self._targets[dep])

        visit(target)
        return order

"""Aggregation of target properties into a session request."""

from __future__ import annotations

import logging
from typing import List, Optional

from xeus_cling_setup.data import CxxStandard, ResolvedProperty, SessionRequest, TargetInfo
from xeus_cling_setup.errors import (
    StandardMismatchError,
    TargetKindError,
    UnknownTargetError,
    UnsupportedStandardError,
)
from xeus_cling_setup.graph import BuildGraph

logger = logging.getLogger(__name__)

INCLUDE_DIRECTORIES_PROPERTY = "INTERFACE_INCLUDE_DIRECTORIES"
COMPILE_FLAGS_PROPERTY = "INTERFACE_COMPILE_FLAGS"
COMPILE_DEFINITIONS_PROPERTY = "INTERFACE_COMPILE_DEFINITIONS"


class PropertyCollector:
    """Collects the exported properties of the requested targets.

    For every target the collector checks that it is a loadable shared library whose
    declared standard the session can provide, then appends its transitively exported
    include directories, compile flags and compile definitions together with its artifact
    location. All target-derived values are deferred; manual entries keep their position
    in front of them.
    """

    def __init__(self, graph: BuildGraph) -> None:
        self._graph = graph

    def collect(self, request: SessionRequest) -> SessionRequest:
        """Aggregate the properties of ``request.target_names`` into a new request.

        Parameters
        ----------
        request : SessionRequest
            The request holding the manually supplied properties.

        Returns
        -------
        SessionRequest
            A copy of ``request`` with the target-derived properties appended.

        Raises
        ------
        UnknownTargetError
            If a target does not exist.
        TargetKindError
            If a target is not a shared library.
        StandardMismatchError
            If a target requires a newer C++ standard than the session.
        """
        targets: List[TargetInfo] = []
        include_directories: List[ResolvedProperty] = list(request.include_directories)
        compile_flags: List[ResolvedProperty] = list(request.compile_flags)
        compile_definitions: List[ResolvedProperty] = list(request.compile_definitions)
        link_libraries: List[ResolvedProperty] = list(request.link_libraries)

        for name in request.target_names:
            info = self.inspect(name, request.cxx_standard)
            targets.append(info)

            graph = self._graph
            include_directories.append(graph.interface_property(name, INCLUDE_DIRECTORIES_PROPERTY))
            compile_flags.append(graph.interface_property(name, COMPILE_FLAGS_PROPERTY))
            compile_definitions.append(graph.interface_property(name, COMPILE_DEFINITIONS_PROPERTY))
            link_libraries.append(graph.target_file(name))
            logger.debug("Collected properties of target %s", name)

        return request.model_copy(
            update={
                "targets": tuple(targets),
                "include_directories": tuple(include_directories),
                "compile_flags": tuple(compile_flags),
                "compile_definitions": tuple(compile_definitions),
                "link_libraries": tuple(link_libraries),
            }
        )

    def inspect(self, name: str, session_standard: CxxStandard) -> TargetInfo:
        """Query and check the facts about a single target."""
        if not self._graph.has_target(name):
            raise UnknownTargetError(f"Got passed a target {name}, but it does not exist")

        kind = self._graph.target_kind(name)
        if not kind.is_loadable:
            raise TargetKindError(
                f"Target {name} must be a shared library to be loaded into the interpreter, "
                f"got {kind.value}"
            )

        standard = self._target_standard(name)
        if standard is not None and standard.is_newer_than(session_standard):
            raise StandardMismatchError(name, standard.value, session_standard.value)

        return TargetInfo(name=name, kind=kind, cxx_standard=standard)

    def _target_standard(self, name: str) -> Optional[CxxStandard]:
        raw = self._graph.target_cxx_standard(name)
        if raw is None:
            return None
        try:
            return CxxStandard.parse(raw)
        except UnsupportedStandardError:
            logger.warning("Ignoring unknown C++ standard '%s' declared by target %s", raw, name)
            return None

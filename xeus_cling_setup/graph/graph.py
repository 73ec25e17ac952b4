"""Abstract interface to the host build graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from xeus_cling_setup.data import DeferredValue, TargetKind


class BuildGraph(ABC):
    """Read-only view of the host build graph.

    The setup engine never owns targets: it asks the graph which targets exist, what kind
    they are and which standard they declare. Properties that are only known when the build
    is generated are handed out as :class:`DeferredValue` expressions and resolved through
    :meth:`evaluate` when the artifacts are rendered.
    """

    @abstractmethod
    def has_target(self, name: str) -> bool:
        """Check whether a target with the given name exists."""
        ...

    @abstractmethod
    def target_kind(self, name: str) -> TargetKind:
        """Get the kind of an existing target.

        Parameters
        ----------
        name : str
            The target name.

        Returns
        -------
        TargetKind
            The kind of the target.
        """
        ...

    @abstractmethod
    def target_cxx_standard(self, name: str) -> Optional[int]:
        """Get the C++ standard an existing target declares, or None if it declares none."""
        ...

    @abstractmethod
    def evaluate(self, expression: str) -> str:
        """Evaluate a deferred expression at generation time.

        Parameters
        ----------
        expression : str
            The expression, as produced by :meth:`interface_property` or :meth:`target_file`.

        Returns
        -------
        str
            The resolved value. Lists are joined with ``;``; an empty string means no value.

        Raises
        ------
        GraphError
            If the expression cannot be evaluated.
        """
        ...

    def interface_property(self, name: str, prop: str) -> DeferredValue:
        """Deferred value of a (transitively propagated) interface property of a target."""
        return DeferredValue(expression=f"$<TARGET_PROPERTY:{name},{prop}>")

    def target_file(self, name: str) -> DeferredValue:
        """Deferred location of the artifact a target builds.

        The final path of a build artifact is fixed only at link time, so it is always
        deferred.
        """
        return DeferredValue(expression=f"$<TARGET_FILE:{name}>")

"""Strong-typed descriptions of build targets."""

from enum import Enum
from typing import Optional

from .standard import CxxStandard
from .utils import FrozenModel, NonEmptyString

TargetRef = NonEmptyString
"""Name of a target in the host build graph. Only used to query properties."""


class TargetKind(str, Enum):
    """Kind of a build target, mirroring the CMake TYPE property."""

    SHARED_LIBRARY = "SHARED_LIBRARY"
    STATIC_LIBRARY = "STATIC_LIBRARY"
    MODULE_LIBRARY = "MODULE_LIBRARY"
    OBJECT_LIBRARY = "OBJECT_LIBRARY"
    INTERFACE_LIBRARY = "INTERFACE_LIBRARY"
    EXECUTABLE = "EXECUTABLE"
    UTILITY = "UTILITY"

    @property
    def is_loadable(self) -> bool:
        """Whether the interpreter can load the artifact at runtime."""
        return self is TargetKind.SHARED_LIBRARY


class TargetInfo(FrozenModel):
    """The facts about a target that were checked while collecting its properties."""

    name: TargetRef
    """The target name."""
    kind: TargetKind
    """The target kind as reported by the build graph."""
    cxx_standard: Optional[CxxStandard] = None
    """The standard the target declares, if any."""

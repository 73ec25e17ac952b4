"""C++ language standard levels."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Union

from xeus_cling_setup.errors import UnsupportedStandardError


class CxxStandard(Enum):
    """Known C++ standard levels, declared in chronological order.

    Members must be compared with :meth:`is_newer_than` rather than by value, because
    C++98 is older than C++11 although 98 > 11.
    """

    CXX98 = 98
    CXX11 = 11
    CXX14 = 14
    CXX17 = 17
    CXX20 = 20
    CXX23 = 23

    @classmethod
    def parse(cls, value: Union[int, float, str, "CxxStandard"]) -> "CxxStandard":
        """Parse a standard level given as integer or string (e.g. ``17`` or ``"17"``).

        Raises
        ------
        UnsupportedStandardError
            If the value does not name a known C++ standard.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, float) and not value.is_integer():
            raise UnsupportedStandardError(
                f"Expected a C++ standard from {{11, 14, 17}}, got '{value}'"
            )
        try:
            return cls(int(value))
        except (TypeError, ValueError) as e:
            raise UnsupportedStandardError(
                f"Expected a C++ standard from {{11, 14, 17}}, got '{value}'"
            ) from e

    @property
    def rank(self) -> int:
        """Chronological position of this standard."""
        return list(CxxStandard).index(self)

    def is_newer_than(self, other: "CxxStandard") -> bool:
        return self.rank > other.rank

    @property
    def flag(self) -> str:
        """The compiler flag selecting this standard."""
        return f"-std=c++{self.value}"

    @property
    def language(self) -> str:
        """Human-readable language name, e.g. ``C++17``."""
        return f"C++{self.value}"

    def __str__(self) -> str:
        return str(self.value)


SUPPORTED_STANDARDS: FrozenSet[CxxStandard] = frozenset(
    {CxxStandard.CXX11, CxxStandard.CXX14, CxxStandard.CXX17}
)
"""Standards the cling interpreter can run."""

DEFAULT_STANDARD = CxxStandard.CXX17
"""Standard used when the session does not request one."""


def require_supported(standard: CxxStandard) -> CxxStandard:
    """Check that cling supports the given standard.

    Raises
    ------
    UnsupportedStandardError
        If the standard is known but outside :data:`SUPPORTED_STANDARDS`.
    """
    if standard not in SUPPORTED_STANDARDS:
        raise UnsupportedStandardError(
            f"Got passed a C++ standard that is not supported by Cling: {standard.language}"
        )
    return standard

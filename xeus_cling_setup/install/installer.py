"""Abstract base class for kernel installers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from xeus_cling_setup.toolchain import Toolchain


class KernelInstaller(ABC):
    """Registers a generated kernel directory with an external tool.

    Different installers handle different registration mechanisms. The driver picks the
    first available one, so tests can substitute a fake and environments without the
    registration tool fall back to a no-op.
    """

    @staticmethod
    @abstractmethod
    def is_available(toolchain: Toolchain) -> bool:
        """Check if this installer can be used with the given toolchain.

        Parameters
        ----------
        toolchain : Toolchain
            The located external programs.

        Returns
        -------
        bool
            True if the installer can be used, False otherwise.
        """
        ...

    @classmethod
    @abstractmethod
    def from_toolchain(cls, toolchain: Toolchain) -> "KernelInstaller":
        """Create the installer for the given toolchain. Only called if it is available."""
        ...

    @abstractmethod
    def install(self, kernel_dir: Path, kernel_id: str) -> None:
        """Register the kernel in ``kernel_dir`` under the name ``kernel_id``.

        Calling this repeatedly with the same arguments must be safe.

        Raises
        ------
        InstallError
            If the registration fails.
        """
        ...

"""Installation of generated sessions into the Jupyter and xeus-cling environment."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Optional

from xeus_cling_setup.docs import DocumentationBundle
from xeus_cling_setup.errors import PrerequisiteMissingError
from xeus_cling_setup.session.result import SessionResult
from xeus_cling_setup.toolchain import Toolchain

from .installer import KernelInstaller
from .registry import select_installer

logger = logging.getLogger(__name__)

TAGS_DIR = Path("etc") / "xeus-cling" / "tags.d"
"""Directory below the prefix that receives the documentation manifest fragments."""

TAGFILES_DIR = Path("share") / "xeus-cling" / "tagfiles"
"""Directory below the prefix that receives the Doxygen tag files."""


class InstallDriver:
    """Copies documentation files into the xeus-cling prefix and registers kernels.

    Every operation overwrites what a previous run installed, so installing the same
    session again is safe.

    Parameters
    ----------
    installer : KernelInstaller
        Performs the kernel registration.
    prefix : Optional[Path]
        The xeus-cling installation prefix. Only needed for documentation.
    """

    def __init__(self, installer: KernelInstaller, prefix: Optional[Path] = None) -> None:
        self._installer = installer
        self._prefix = prefix

    @classmethod
    def for_toolchain(cls, toolchain: Toolchain) -> "InstallDriver":
        """Create a driver with the best available installer for ``toolchain``."""
        return cls(select_installer(toolchain), toolchain.prefix)

    @property
    def installer(self) -> KernelInstaller:
        return self._installer

    def install(self, result: SessionResult, documentation: bool = True) -> bool:
        """Install the documentation files (if any) and register the kernel.

        Parameters
        ----------
        result : SessionResult
            The output of a generation pass.
        documentation : bool
            Whether to install the documentation files first.

        Returns
        -------
        bool
            False if installation is suppressed for this session, True otherwise.
        """
        if result.no_install:
            logger.info("Installation of kernel '%s' is suppressed", result.display_name)
            return False
        if documentation and result.documentation is not None:
            self.install_documentation(result.documentation)
        self._installer.install(result.output_dir, result.kernel_id)
        return True

    def install_documentation(self, bundle: DocumentationBundle) -> List[Path]:
        """Copy manifest fragments and tag files into the xeus-cling prefix.

        Returns
        -------
        List[Path]
            The installed files, fragments first.

        Raises
        ------
        PrerequisiteMissingError
            If the xeus-cling installation prefix is unknown.
        """
        if self._prefix is None:
            raise PrerequisiteMissingError(
                "Cannot install Doxygen information: the xeus-cling installation prefix is "
                "unknown"
            )
        logger.info("Installing Doxygen information for Jupyter inline documentation...")
        installed = [_copy_into(f, self._prefix / TAGS_DIR) for f in bundle.fragments]
        installed += [_copy_into(t, self._prefix / TAGFILES_DIR) for t in bundle.tagfiles]
        return installed


def _copy_into(source: Path, directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    destination = directory / source.name
    shutil.copyfile(source, destination)
    return destination

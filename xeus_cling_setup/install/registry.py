"""Selection of the kernel installer for a toolchain."""

from __future__ import annotations

from typing import List, Type

from xeus_cling_setup.toolchain import Toolchain

from .installer import KernelInstaller
from .installers import JupyterKernelspecInstaller, NoOpInstaller

_INSTALLER_PRIORITY: List[Type[KernelInstaller]] = [JupyterKernelspecInstaller, NoOpInstaller]
"""Installer types in priority order for automatic selection."""


def select_installer(toolchain: Toolchain) -> KernelInstaller:
    """Instantiate the first available installer in priority order.

    The following installers are available (high to low priority):

    - JupyterKernelspecInstaller: runs ``jupyter kernelspec install``.
    - NoOpInstaller: logs a warning, so a missing jupyter never fails the build.

    Parameters
    ----------
    toolchain : Toolchain
        The located external programs.

    Returns
    -------
    KernelInstaller
        The selected installer.
    """
    for installer_type in _INSTALLER_PRIORITY:
        if installer_type.is_available(toolchain):
            return installer_type.from_toolchain(toolchain)
    raise RuntimeError("No kernel installer is available")

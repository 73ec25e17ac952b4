"""Installation of generated kernels.

- KernelInstaller: abstract base class of registration mechanisms
- select_installer: picks the first available installer for a toolchain
- InstallDriver: installs documentation files and registers the kernel
"""

from .installer import KernelInstaller
from .registry import select_installer
from .driver import InstallDriver

__all__ = ["KernelInstaller", "select_installer", "InstallDriver"]

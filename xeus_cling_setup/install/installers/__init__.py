"""Concrete kernel installers."""

from .jupyter_installer import JupyterKernelspecInstaller
from .noop_installer import NoOpInstaller

__all__ = ["JupyterKernelspecInstaller", "NoOpInstaller"]

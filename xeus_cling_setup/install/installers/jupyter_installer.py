"""Installer invoking ``jupyter kernelspec install``."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

from xeus_cling_setup.errors import InstallError
from xeus_cling_setup.install.installer import KernelInstaller
from xeus_cling_setup.toolchain import Toolchain

logger = logging.getLogger(__name__)


class JupyterKernelspecInstaller(KernelInstaller):
    """Registers kernels through ``jupyter kernelspec install --sys-prefix``.

    The kernel directory is copied by jupyter together with every file in it, so the
    generated logos are installed as well. Re-installing under the same name replaces the
    previous registration.
    """

    def __init__(self, jupyter: Path) -> None:
        self._jupyter = jupyter

    @staticmethod
    def is_available(toolchain: Toolchain) -> bool:
        return toolchain.jupyter is not None

    @classmethod
    def from_toolchain(cls, toolchain: Toolchain) -> "JupyterKernelspecInstaller":
        assert toolchain.jupyter is not None
        return cls(toolchain.jupyter)

    def command(self, kernel_dir: Path, kernel_id: str) -> List[str]:
        return [
            str(self._jupyter),
            "kernelspec",
            "install",
            str(kernel_dir),
            "--sys-prefix",
            f"--name={kernel_id}",
        ]

    def install(self, kernel_dir: Path, kernel_id: str) -> None:
        cmd = self.command(kernel_dir, kernel_id)
        logger.info("Install kernelspec into the jupyter environment...")
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise InstallError(
                f"'{' '.join(cmd)}' failed with exit code {e.returncode}: {e.stderr.strip()}"
            ) from e
        except OSError as e:
            raise InstallError(f"Could not run {self._jupyter}: {e}") from e

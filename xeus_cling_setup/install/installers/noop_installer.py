from __future__ import annotations

import logging
from pathlib import Path

from xeus_cling_setup.install.installer import KernelInstaller
from xeus_cling_setup.toolchain import Toolchain

logger = logging.getLogger(__name__)


class NoOpInstaller(KernelInstaller):
    """Fallback used when no registration tool is available. Only logs a warning."""

    @staticmethod
    def is_available(toolchain: Toolchain) -> bool:
        return True

    @classmethod
    def from_toolchain(cls, toolchain: Toolchain) -> "NoOpInstaller":
        return cls()

    def install(self, kernel_dir: Path, kernel_id: str) -> None:
        logger.warning(
            "The jupyter executable was not found, not installing kernel spec from %s", kernel_dir
        )

from pathlib import Path
from typing import Optional, Tuple

from xeus_cling_setup.data.utils import FrozenModel
from xeus_cling_setup.docs import DocumentationBundle


class SessionResult(FrozenModel):
    """What a successful generation pass left in the build output directory."""

    display_name: str
    """The kernel display name."""
    kernel_id: str
    """Stable identifier derived from the display name."""
    output_dir: Path
    """The directory holding the kernel manifest, ready for ``jupyter kernelspec install``."""
    header_path: Path
    """The generated bootstrap header."""
    manifest_path: Path
    """The generated kernel manifest."""
    logo_paths: Tuple[Path, ...] = ()
    """The copied logo files."""
    documentation: Optional[DocumentationBundle] = None
    """Documentation files to install, if documentation pairs were configured."""
    no_install: bool = False
    """Kernel registration was suppressed for this session."""

from xeus_cling_setup.data import (
    CxxStandard,
    DeferredValue,
    KernelManifest,
    LiteralValue,
    SessionContext,
    SessionOptions,
    SessionRequest,
    TagManifest,
    TargetKind,
)
from xeus_cling_setup.docs import DocumentationBundle, ResourceRegistry, TagFetcher
from xeus_cling_setup.errors import (
    DuplicateTagFileError,
    GraphError,
    IllegalAssetNameError,
    InsecureURLError,
    InstallError,
    PairingLengthError,
    PrerequisiteMissingError,
    SetupError,
    StandardMismatchError,
    TagFetchError,
    TargetKindError,
    UnknownTargetError,
    UnsupportedStandardError,
)
from xeus_cling_setup.graph import BuildGraph, StaticBuildGraph, TargetDescription
from xeus_cling_setup.install import InstallDriver
from xeus_cling_setup.logging import configure_logging, get_logger
from xeus_cling_setup.session import (
    ArtifactComposer,
    ConstraintValidator,
    PropertyCollector,
    SessionResult,
    SessionSetup,
)
from xeus_cling_setup.toolchain import Toolchain, locate_toolchain

__all__ = [
    # Main classes
    "SessionSetup",
    "SessionResult",
    "InstallDriver",
    # Pipeline stages
    "PropertyCollector",
    "ConstraintValidator",
    "ArtifactComposer",
    "ResourceRegistry",
    "TagFetcher",
    "DocumentationBundle",
    # Build graph
    "BuildGraph",
    "StaticBuildGraph",
    "TargetDescription",
    "TargetKind",
    # Data types
    "CxxStandard",
    "LiteralValue",
    "DeferredValue",
    "SessionOptions",
    "SessionContext",
    "SessionRequest",
    "KernelManifest",
    "TagManifest",
    # Toolchain
    "Toolchain",
    "locate_toolchain",
    # Errors
    "SetupError",
    "PrerequisiteMissingError",
    "GraphError",
    "UnknownTargetError",
    "TargetKindError",
    "StandardMismatchError",
    "UnsupportedStandardError",
    "PairingLengthError",
    "DuplicateTagFileError",
    "InsecureURLError",
    "IllegalAssetNameError",
    "TagFetchError",
    "InstallError",
    # Logging
    "configure_logging",
    "get_logger",
]

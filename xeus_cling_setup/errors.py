"""Exception taxonomy of the session setup pipeline.

Every failure that aborts a generation pass derives from :class:`SetupError`. Validation
errors are raised before any artifact is written, so catching one guarantees that the build
output directory was left untouched by the failed pass.
"""

from __future__ import annotations


class SetupError(RuntimeError):
    """Base class for all errors raised while setting up an interpreter session."""


class PrerequisiteMissingError(SetupError):
    """Raised when the interpreter binary is absent and the session was marked as required."""


class GraphError(SetupError):
    """Raised when the build graph cannot answer a query or evaluate an expression."""


class UnknownTargetError(SetupError):
    """Raised when a target name does not exist in the build graph."""


class TargetKindError(SetupError):
    """Raised when a target is not a shared library and can therefore not be loaded."""


class StandardMismatchError(SetupError):
    """Raised when a target requires a newer C++ standard than the session provides."""

    def __init__(self, target: str, target_standard: int, session_standard: int) -> None:
        self.target = target
        self.target_standard = target_standard
        self.session_standard = session_standard
        super().__init__(
            f"Target '{target}' requires C++{target_standard}, although the session is set "
            f"up for C++{session_standard}"
        )


class UnsupportedStandardError(SetupError):
    """Raised when the requested C++ standard is unknown or not supported by cling."""


class PairingLengthError(SetupError):
    """Raised when the documentation URL and tag file lists differ in length."""


class DuplicateTagFileError(SetupError):
    """Raised when two documentation tag files share a file name.

    Fragments and installed tag files are named after the tag file's basename, so such pairs
    would overwrite each other.
    """


class InsecureURLError(SetupError):
    """Raised when a documentation URL does not use the https:// scheme."""


class IllegalAssetNameError(SetupError):
    """Raised when a kernel logo file does not carry one of the accepted names."""


class TagFetchError(SetupError):
    """Raised when downloading a Doxygen tag file fails.

    The transport error is kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Error downloading tag file from {url}: {cause}")


class InstallError(SetupError):
    """Raised when the external kernel registration command fails."""

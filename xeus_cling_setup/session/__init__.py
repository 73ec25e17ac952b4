"""Session generation subsystem.

This package turns session options into the files a xeus-cling kernel needs:
- PropertyCollector: aggregates target properties from the build graph
- ConstraintValidator: checks the aggregated request before anything is generated
- ArtifactComposer: composes the deferred bootstrap header and kernel manifest
- SessionSetup: runs the whole generation pass and writes the results

The typical workflow is:
1. Describe the session: context = SessionContext(project_name=..., source_dir=..., binary_dir=...)
2. Generate: result = SessionSetup(graph, context).generate({"TARGETS": ["foo"]})
3. Install: InstallDriver.for_toolchain(toolchain).install(result)
"""

from .artifact import GeneratedArtifact, RenderedArtifact, render_all
from .collector import PropertyCollector
from .composer import ArtifactComposer, SessionArtifacts, kernel_id
from .result import SessionResult
from .setup import SessionSetup
from .validator import ConstraintValidator

__all__ = [
    "PropertyCollector",
    "ConstraintValidator",
    "ArtifactComposer",
    "SessionArtifacts",
    "GeneratedArtifact",
    "RenderedArtifact",
    "render_all",
    "kernel_id",
    "SessionResult",
    "SessionSetup",
]

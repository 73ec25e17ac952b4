"""Build graph collaborators.

- BuildGraph: the read-only interface the engine queries for target facts and uses to
  evaluate deferred expressions at generation time
- StaticBuildGraph: an in-process implementation over static target descriptions
"""

from .graph import BuildGraph
from .static_graph import StaticBuildGraph, TargetDescription

__all__ = ["BuildGraph", "StaticBuildGraph", "TargetDescription"]

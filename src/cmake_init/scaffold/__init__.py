"""cmake-init scaffolding - planning, guarding, rendering and writing."""

from cmake_init.scaffold.guard import Decision, WriteMode
from cmake_init.scaffold.init import (
    ArtifactPlan,
    PlannedArtifact,
    ScaffoldResult,
    build_artifact_plan,
    generate,
    scaffold_project,
)
from cmake_init.scaffold.renderer import TemplateRenderer

__all__ = [
    "ArtifactPlan",
    "Decision",
    "PlannedArtifact",
    "ScaffoldResult",
    "TemplateRenderer",
    "WriteMode",
    "build_artifact_plan",
    "generate",
    "scaffold_project",
]

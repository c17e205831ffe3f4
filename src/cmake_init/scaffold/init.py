"""Project scaffolding for `cmake-init`.

Generates a CMake project: .gitignore, CMakeLists.txt, task.cmake,
CMakePresets.json and starter sources for a binary or a library. Existing
user content is never overwritten: the ignore file is appended to, starter
files are skipped, and a pre-existing core file aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from cmake_init.errors import ArtifactExistsError, ArtifactIOError
from cmake_init.models.config import (
    RawOptions,
    ResolvedConfiguration,
    UserDefaults,
    resolve_configuration,
)
from cmake_init.observability import get_logger
from cmake_init.scaffold import files
from cmake_init.scaffold.guard import (
    Decision,
    WriteMode,
    decide,
    ensure_absent,
    ignore_entry_present,
)
from cmake_init.scaffold.renderer import TemplateRenderer
from cmake_init.scaffold.vcs import init_repository

logger = get_logger("scaffold")

IGNORE_FILE = ".gitignore"
IGNORE_ENTRY = "build"

# Core project-definition files, checked in this order before any is written
CORE_ARTIFACTS: tuple[str, ...] = ("CMakeLists.txt", "task.cmake", "CMakePresets.json")

FOLLOW_UP_COMMAND = "cmake --workflow --preset default"


@dataclass(frozen=True)
class PlannedArtifact:
    """One file the scaffold produces.

    Attributes:
        path: Output path relative to the target directory.
        content: Produces the full file content when the file is created.
        mode: What to do when the file already exists.
        append_entry: Line added to an existing file in create_or_append mode.
    """

    path: str
    content: Callable[[], str]
    mode: WriteMode
    append_entry: str | None = None


ArtifactPlan = tuple[PlannedArtifact, ...]


@dataclass
class ScaffoldResult:
    """Outcome of one scaffolding run (paths relative to directory)."""

    directory: Path
    created: list[str] = field(default_factory=list)
    appended: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    repository_initialized: bool = False
    follow_up: str = FOLLOW_UP_COMMAND


def build_artifact_plan(
    config: ResolvedConfiguration, renderer: TemplateRenderer
) -> ArtifactPlan:
    """Build the ordered list of artifacts for config.

    The ignore file comes first, then the core files, then the starter
    sources for the selected target kind and dialect.
    """
    data = config.template_data()

    def template(name: str) -> Callable[[], str]:
        return lambda: renderer.render(name, data)

    plan = [
        PlannedArtifact(
            IGNORE_FILE,
            template("gitignore.j2"),
            WriteMode.create_or_append,
            append_entry=IGNORE_ENTRY,
        )
    ]
    plan.extend(
        PlannedArtifact(path, template(f"{path}.j2"), WriteMode.create_or_abort)
        for path in CORE_ARTIFACTS
    )

    ext = config.source_extension
    if config.is_binary:
        starters = [(f"src/main.{ext}", f"src/main.{ext}.j2")]
    else:
        starters = [
            (f"src/lib.{ext}", f"src/lib.{ext}.j2"),
            ("src/lib.h", "src/lib.h.j2"),
            (f"include/{config.name}.h", "include/umbrella.h.j2"),
        ]
    plan.extend(
        PlannedArtifact(path, template(name), WriteMode.create_if_absent)
        for path, name in starters
    )
    return tuple(plan)


def _append_entry(target: Path, entry: str) -> bool:
    """Add entry to an existing ignore file. Returns False if already listed.

    The file is handled as bytes and the entry is terminated with the
    line ending the file already uses.
    """
    content = files.read_bytes(target)
    raw_entry = entry.encode("utf-8")
    if ignore_entry_present(content, raw_entry):
        return False
    newline = b"\r\n" if b"\r\n" in content else b"\n"
    prefix = newline if content and not content.endswith(b"\n") else b""
    files.append_bytes(target, prefix + raw_entry + newline)
    return True


def scaffold_project(
    directory: Path,
    config: ResolvedConfiguration,
    renderer: TemplateRenderer | None = None,
) -> ScaffoldResult:
    """Generate a CMake project in the given directory.

    The ignore file is handled before the core files are checked, so a run
    that aborts still leaves it created or updated.

    Args:
        directory: Target directory. Created if missing.
        config: The resolved configuration to render.
        renderer: Template renderer; defaults to the packaged templates.

    Returns:
        What was created, appended to and skipped.

    Raises:
        ArtifactExistsError: If CMakeLists.txt, task.cmake or
            CMakePresets.json already exists.
        ArtifactIOError: If any file operation fails.
        VcsError: If repository initialization fails.
    """
    directory = directory.resolve()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactIOError(str(directory), "creating", e.strerror or str(e)) from e

    renderer = renderer or TemplateRenderer()
    plan = build_artifact_plan(config, renderer)
    result = ScaffoldResult(directory=directory)

    core_checked = False
    for artifact in plan:
        if artifact.mode is WriteMode.create_or_abort and not core_checked:
            core_paths = [a.path for a in plan if a.mode is WriteMode.create_or_abort]
            try:
                ensure_absent(directory, core_paths)
            except ArtifactExistsError as e:
                logger.warning("artifact.exists", path=e.path, directory=str(directory))
                raise
            core_checked = True

        target = directory / artifact.path
        decision = decide(directory, artifact.path, artifact.mode)

        if decision is Decision.skip:
            logger.debug("artifact.skipped", path=artifact.path)
            result.skipped.append(artifact.path)
            continue
        if decision is Decision.append:
            if _append_entry(target, artifact.append_entry or ""):
                logger.debug("artifact.appended", path=artifact.path)
                result.appended.append(artifact.path)
            else:
                logger.debug("artifact.unchanged", path=artifact.path)
                result.skipped.append(artifact.path)
            continue

        files.write(target, artifact.content())
        logger.debug("artifact.created", path=artifact.path)
        result.created.append(artifact.path)

    result.repository_initialized = init_repository(directory, config.vcs)
    return result


def generate(
    directory: Path,
    raw: RawOptions,
    defaults: UserDefaults | None = None,
    renderer: TemplateRenderer | None = None,
) -> ScaffoldResult:
    """Resolve raw options and scaffold the project in one step."""
    config = resolve_configuration(raw, directory, defaults)
    return scaffold_project(directory, config, renderer)

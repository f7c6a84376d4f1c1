"""Contract build stage."""

import logging
from pathlib import Path
from typing import List

from .constants import STALE_ARTIFACT_PATTERNS
from .paths import get_build_dir
from .runner import ProcessRunner
from .types import Settings

LOG = logging.getLogger(__name__)


def remove_stale_artifacts(build_dir: Path) -> List[Path]:
    """
    Delete compiled artifacts and dependency files left by a previous build.

    A contract that no longer builds must not leave a `.wasm` behind that
    would be deployed, bound and imported later.

    Args:
        build_dir: Build output directory (may not exist yet)

    Returns:
        Paths that were removed
    """
    removed: List[Path] = []
    for pattern in STALE_ARTIFACT_PATTERNS:
        LOG.info(f"remove {build_dir / pattern}")
        for entry in sorted(build_dir.glob(pattern)):
            if entry.is_file():
                entry.unlink()
                removed.append(entry)
    return removed


def build_all(settings: Settings, runner: ProcessRunner) -> None:
    """
    Rebuild every contract in the workspace.

    Raises:
        CommandFailedError: If the build tool fails
    """
    remove_stale_artifacts(get_build_dir(settings))
    runner.run([settings.profile.cli, "contract", "build"], cwd=settings.project_root)

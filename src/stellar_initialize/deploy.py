"""Contract deployment stage."""

import logging
from pathlib import Path
from typing import List

from .paths import alias_from_path, get_build_dir, get_records_dir
from .runner import ProcessRunner
from .types import RecordFormat, Settings

LOG = logging.getLogger(__name__)


def list_artifacts(settings: Settings) -> List[Path]:
    """
    List compiled `.wasm` artifacts in the build directory.

    Returns:
        Artifact paths sorted by filename; empty if nothing was built
    """
    return sorted(get_build_dir(settings).glob("*.wasm"))


def deploy(settings: Settings, runner: ProcessRunner, wasm: Path) -> str:
    """
    Deploy one artifact under an alias derived from its filename.

    JSON-record profiles pass `--alias` so the tool persists the contract id
    itself. Text-record profiles capture the id from stdout and write it to
    `<records_dir>/<alias>.txt`.

    Args:
        settings: Pipeline settings
        runner: Process runner
        wasm: Path to the compiled artifact

    Returns:
        The alias used for the deployment

    Raises:
        CommandFailedError: If the deploy tool fails
    """
    profile = settings.profile
    alias = alias_from_path(wasm)
    command = [profile.cli, "contract", "deploy", "--wasm", str(wasm), "--ignore-checks"]

    match profile.record_format:
        case RecordFormat.JSON:
            runner.run([*command, "--alias", alias], cwd=settings.project_root)
        case RecordFormat.TEXT:
            result = runner.run(command, cwd=settings.project_root, capture=True)
            records_dir = get_records_dir(settings)
            records_dir.mkdir(parents=True, exist_ok=True)
            record_path = records_dir / f"{alias}.txt"
            record_path.write_text(f"{(result.stdout or '').strip()}\n")
            LOG.debug(f"Wrote {record_path}")

    return alias


def deploy_all(settings: Settings, runner: ProcessRunner) -> List[str]:
    """
    Deploy every artifact produced by the build stage.

    The first failure aborts the remaining deployments.

    Returns:
        Aliases in deployment order
    """
    artifacts = list_artifacts(settings)
    if not artifacts:
        LOG.warning(f"No .wasm artifacts found in {get_build_dir(settings)}")

    return [deploy(settings, runner, wasm) for wasm in artifacts]

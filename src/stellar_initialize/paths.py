"""Path management utilities for stellar-initialize."""

from pathlib import Path
from typing import Union

from .constants import BUILD_DIR, CONTRACTS_DIR, PACKAGES_DIR
from .types import Settings


def alias_from_path(path: Union[Path, str]) -> str:
    """
    Derive a contract alias from a file name.

    Only the final extension is stripped, so `token.release.wasm`
    becomes `token.release`.

    Args:
        path: Artifact or record path

    Returns:
        Alias string
    """
    return Path(path).stem


def get_build_dir(settings: Settings) -> Path:
    """Directory holding compiled `.wasm` artifacts."""
    return settings.project_root / BUILD_DIR


def get_records_dir(settings: Settings) -> Path:
    """Directory holding one deployment record per alias."""
    return settings.project_root / settings.profile.records_dir


def get_package_dir(settings: Settings, alias: str) -> Path:
    """Output directory for the generated client package of `alias`."""
    return settings.project_root / PACKAGES_DIR / alias


def get_contracts_dir(settings: Settings) -> Path:
    """Directory holding generated import files."""
    return settings.project_root / CONTRACTS_DIR

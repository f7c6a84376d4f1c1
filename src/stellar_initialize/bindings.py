"""TypeScript binding generation for deployed contracts."""

import logging
from typing import List

from .constants import PACKAGE_MANAGER
from .paths import get_package_dir
from .records import resolve_contracts
from .runner import ProcessRunner
from .types import ResolvedContract, Settings

LOG = logging.getLogger(__name__)


def install_package(settings: Settings, runner: ProcessRunner, alias: str) -> None:
    """
    Install dependencies of a generated package and build it in place.

    Raises:
        CommandFailedError: If install or build fails
    """
    package_dir = get_package_dir(settings, alias)
    runner.run([PACKAGE_MANAGER, "install"], cwd=package_dir)
    runner.run([PACKAGE_MANAGER, "run", "build"], cwd=package_dir)


def bind(settings: Settings, runner: ProcessRunner, contract: ResolvedContract) -> None:
    """
    Generate a TypeScript client package for one contract.

    The package lands in `packages/<alias>`, replacing any earlier bindings.
    Everything in `packages` is expected to be part of the frontend's npm
    workspace, so the package is importable by its alias.

    Args:
        settings: Pipeline settings
        runner: Process runner
        contract: Resolved alias and contract id

    Raises:
        CommandFailedError: If the bindings generator fails
    """
    runner.run(
        [
            settings.profile.cli,
            "contract",
            "bindings",
            "typescript",
            "--contract-id",
            contract.contract_id,
            "--output-dir",
            str(get_package_dir(settings, contract.alias)),
            "--overwrite",
        ],
        cwd=settings.project_root,
    )

    if settings.profile.install_packages:
        install_package(settings, runner, contract.alias)


def bind_all(settings: Settings, runner: ProcessRunner) -> List[ResolvedContract]:
    """
    Generate bindings for every contract deployed to the active network.

    Returns:
        Contracts that were bound
    """
    contracts = resolve_contracts(settings)
    for contract in contracts:
        bind(settings, runner, contract)
    return contracts

"""Main entry point for running the initialize pipeline."""

import logging
from typing import Iterable, Optional

from .accounts import provision_account
from .bindings import bind_all
from .build import build_all
from .config import require
from .constants import STAGES
from .deploy import deploy_all
from .exceptions import ConfigurationError
from .imports import import_all
from .rpc import check_rpc_health
from .runner import ProcessRunner
from .types import InitializeResult, Settings

LOG = logging.getLogger(__name__)


def initialize(
    settings: Settings,
    runner: Optional[ProcessRunner] = None,
    skip: Iterable[str] = (),
    check_rpc: bool = False,
) -> InitializeResult:
    """
    Provision, build, deploy, bind and import every contract in the project.

    Stages run strictly in order. Any failing external command aborts the
    run; re-running the whole pipeline is the recovery path.

    Args:
        settings: Pipeline settings
        runner: Process runner (defaults to one using the merged environment)
        skip: Stage names to leave out (see STAGES)
        check_rpc: Verify the RPC endpoint is healthy before touching the network

    Returns:
        InitializeResult describing what was deployed, bound and imported

    Raises:
        ConfigurationError: If a stage name is unknown or a setting is missing
        CommandFailedError: If an external tool fails
        RpcUnavailableError: If check_rpc is set and the RPC is unhealthy
    """
    skipped = set(skip)
    unknown = skipped - set(STAGES)
    if unknown:
        raise ConfigurationError(
            f"Unknown stage(s): {', '.join(sorted(unknown))}. Available: {', '.join(STAGES)}"
        )

    if runner is None:
        runner = ProcessRunner(env=settings.environ)

    LOG.info(f"Initializing {settings.project_root} with profile '{settings.profile.name}'")

    if check_rpc:
        status = check_rpc_health(require(settings, "rpc_url"))
        LOG.info(f"RPC {settings.rpc_url} is {status}")

    result = InitializeResult()

    if "account" not in skipped:
        provision_account(settings, runner)
    if "build" not in skipped:
        build_all(settings, runner)
    if "deploy" not in skipped:
        result.deployed = deploy_all(settings, runner)
    if "bind" not in skipped:
        result.bound = bind_all(settings, runner)
    if "import" not in skipped:
        result.imports = import_all(settings)

    return result

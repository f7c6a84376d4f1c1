"""Deployer account provisioning."""

import logging

from .config import require
from .runner import ProcessRunner
from .types import Settings

LOG = logging.getLogger(__name__)


def provision_account(settings: Settings, runner: ProcessRunner) -> None:
    """
    Generate the deployer keypair and, for funding profiles, fund it.

    Funding an already funded account fails; that failure is ignored so
    reruns stay idempotent. Key generation failures still abort.

    Args:
        settings: Pipeline settings
        runner: Process runner

    Raises:
        ConfigurationError: If no account name is configured
        CommandFailedError: If key generation fails
    """
    account = require(settings, "account")
    profile = settings.profile
    keys = [profile.cli, *profile.keys_command]

    runner.run([*keys, "generate", account])

    if profile.fund_account:
        result = runner.run([*keys, "fund", account], check=False)
        if result.returncode != 0:
            LOG.warning(
                f"Funding '{account}' exited with status {result.returncode} "
                "(account may already be funded), continuing"
            )

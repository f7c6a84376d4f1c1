"""Settings loading for stellar-initialize."""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    DEFAULT_PROFILE,
    LOCAL_NETWORKS,
    PROFILES,
    PUBLIC_PREFIX,
    STANDALONE_PASSPHRASE,
)
from .exceptions import ConfigurationError
from .types import ImportTemplate, Profile, RecordFormat, Settings

LOG = logging.getLogger(__name__)


def get_profile(name: str = DEFAULT_PROFILE) -> Profile:
    """
    Build a Profile from the PROFILES table.

    Args:
        name: Profile name (e.g. "stellar", "soroban-legacy")

    Returns:
        Profile instance

    Raises:
        ConfigurationError: If the profile is unknown
    """
    if name not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile '{name}'. Available: {', '.join(sorted(PROFILES))}"
        )

    entry = PROFILES[name]
    return Profile(
        name=name,
        cli=entry["cli"],
        keys_command=tuple(entry["keys_command"]),
        env_prefix=entry["env_prefix"],
        records_dir=entry["records_dir"],
        record_format=RecordFormat(entry["record_format"]),
        network_key=entry["network_key"],
        template=ImportTemplate(entry["template"]),
        client_class=entry["client_class"],
        fund_account=entry["fund_account"],
        install_packages=entry["install_packages"],
    )


def merge_public_env(environ: Mapping[str, str]) -> Dict[str, str]:
    """
    Expose every PUBLIC_-prefixed variable under its unprefixed name.

    The input mapping is not modified. A PUBLIC_ value replaces an existing
    unprefixed value of the same name.

    Args:
        environ: Source environment

    Returns:
        New dict with both prefixed and unprefixed names
    """
    merged = dict(environ)
    for key, value in environ.items():
        if key.startswith(PUBLIC_PREFIX) and len(key) > len(PUBLIC_PREFIX):
            merged[key[len(PUBLIC_PREFIX):]] = value
    return merged


def load_environment(
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge a .env file with the process environment.

    Process environment wins over the .env file. PUBLIC_ promotion runs on
    the merged result.

    Args:
        env_file: Path to .env file (skipped if missing)
        environ: Process environment (defaults to os.environ)

    Returns:
        Merged environment dict
    """
    if environ is None:
        environ = os.environ

    merged: Dict[str, str] = {}
    if env_file is not None and Path(env_file).is_file():
        LOG.debug(f"Loading environment from {env_file}")
        # dotenv_values yields None for keys declared without a value
        merged.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    merged.update(environ)

    return merge_public_env(merged)


def load_settings(
    project_root: Union[Path, str] = ".",
    profile: Union[Profile, str] = DEFAULT_PROFILE,
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build the immutable Settings used by every pipeline stage.

    Args:
        project_root: Project directory (defaults to the current directory)
        profile: Profile instance or name
        env_file: .env path (defaults to <project_root>/.env)
        environ: Process environment (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the profile is unknown
    """
    root = Path(project_root).absolute()
    if isinstance(profile, str):
        profile = get_profile(profile)
    if env_file is None:
        env_file = root / ".env"

    merged = load_environment(env_file, environ)

    return Settings(
        project_root=root,
        profile=profile,
        account=merged.get(profile.env_name("ACCOUNT")) or None,
        network=merged.get(profile.env_name("NETWORK")) or None,
        network_passphrase=merged.get(profile.env_name("NETWORK_PASSPHRASE")) or None,
        rpc_url=merged.get(profile.env_name("RPC_URL")) or None,
        environ=MappingProxyType(merged),
    )


def require(settings: Settings, attribute: str) -> str:
    """
    Return a settings value, failing if it was not configured.

    Args:
        settings: Settings instance
        attribute: One of "account", "network", "network_passphrase", "rpc_url"

    Raises:
        ConfigurationError: If the value is missing
    """
    value = getattr(settings, attribute)
    if not value:
        env_name = settings.profile.env_name(attribute.upper())
        raise ConfigurationError(
            f"${env_name} is not set (checked the environment, PUBLIC_{env_name} and .env)"
        )
    return value


def network_identity(settings: Settings) -> Optional[str]:
    """
    Key used to pick a contract id out of a JSON deployment record.

    Returns:
        The network passphrase or network name, per profile; None for
        profiles whose records carry no network key

    Raises:
        ConfigurationError: If the required setting is missing
    """
    match settings.profile.network_key:
        case "passphrase":
            return require(settings, "network_passphrase")
        case "network":
            return require(settings, "network")
        case _:
            return None


def is_local_network(settings: Settings) -> bool:
    """True when targeting a local/standalone network that serves plain HTTP."""
    if settings.network is not None and settings.network.lower() in LOCAL_NETWORKS:
        return True
    return settings.network_passphrase == STANDALONE_PASSPHRASE

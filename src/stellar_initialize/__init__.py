"""
stellar-initialize: build, deploy and wire up Soroban contracts for a frontend
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_settings, merge_public_env
from .exceptions import (
    CommandFailedError,
    ConfigurationError,
    InitializeError,
    InvalidDeploymentRecordError,
    RpcUnavailableError,
    ToolNotFoundError,
)
from .pipeline import initialize
from .runner import ProcessRunner
from .types import InitializeResult, ProcessResult, Profile, ResolvedContract, Settings

try:
    __version__ = version("stellar-initialize")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "initialize",
    "load_settings",
    "merge_public_env",
    "ProcessRunner",
    "ProcessResult",
    "Profile",
    "Settings",
    "ResolvedContract",
    "InitializeResult",
    "InitializeError",
    "CommandFailedError",
    "ToolNotFoundError",
    "ConfigurationError",
    "InvalidDeploymentRecordError",
    "RpcUnavailableError",
]

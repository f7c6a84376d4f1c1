"""Data types and dataclasses for stellar-initialize."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class RecordFormat(Enum):
    """
    Persistence strategy for deployment records.

    - JSON: the deploy tool writes {"ids": {network key: contract id}}
    - TEXT: the script captures the contract id printed on stdout
    """

    JSON = "json"
    TEXT = "text"


class ImportTemplate(Enum):
    """Shape of the generated client wrapper."""

    CONTRACT_ID = "contract-id"
    NETWORK = "network"


@dataclass(frozen=True)
class Profile:
    """One variant of the initialize pipeline."""

    name: str
    cli: str
    keys_command: Tuple[str, ...]
    env_prefix: str  # "SOROBAN" or "STELLAR"
    records_dir: str  # relative to project root
    record_format: RecordFormat
    network_key: Optional[str]  # "passphrase", "network" or None
    template: ImportTemplate
    client_class: str
    fund_account: bool
    install_packages: bool

    def env_name(self, suffix: str) -> str:
        """Return the prefixed environment variable name, e.g. STELLAR_ACCOUNT."""
        return f"{self.env_prefix}_{suffix}"


@dataclass(frozen=True)
class Settings:
    """Immutable configuration shared by every pipeline stage."""

    project_root: Path
    profile: Profile
    account: Optional[str] = None
    network: Optional[str] = None
    network_passphrase: Optional[str] = None
    rpc_url: Optional[str] = None
    environ: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ResolvedContract:
    """A deployed contract id selected for the active network."""

    alias: str
    contract_id: str


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of an external command."""

    returncode: int
    stdout: Optional[str] = None


@dataclass
class InitializeResult:
    """Summary of a pipeline run."""

    deployed: List[str] = field(default_factory=list)
    bound: List[ResolvedContract] = field(default_factory=list)
    imports: List[Path] = field(default_factory=list)

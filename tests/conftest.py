"""Shared pytest fixtures for stellar-initialize tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from stellar_initialize.config import load_settings
from stellar_initialize.constants import BUILD_DIR
from stellar_initialize.exceptions import CommandFailedError
from stellar_initialize.types import ProcessResult, Settings

TESTNET_PASSPHRASE = "Test SDF Network ; September 2015"
STANDALONE_PASSPHRASE = "Standalone Network ; February 2017"


class FakeRunner:
    """Stand-in for ProcessRunner that records commands instead of running them."""

    def __init__(self):
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[Path]] = []
        self._rules: List[Tuple[Tuple[str, ...], int, Optional[str], Optional[Callable]]] = []

    def on(
        self,
        *tokens: str,
        returncode: int = 0,
        stdout: Optional[str] = None,
        side_effect: Optional[Callable[[List[str], Optional[Path]], None]] = None,
    ) -> None:
        """Script the outcome of commands containing all `tokens`."""
        self._rules.append((tokens, returncode, stdout, side_effect))

    def run(self, command, cwd=None, capture=False, check=True) -> ProcessResult:
        self.calls.append(list(command))
        self.cwds.append(cwd)

        returncode, stdout = 0, ""
        for tokens, rule_returncode, rule_stdout, side_effect in self._rules:
            if all(token in command for token in tokens):
                if side_effect is not None:
                    side_effect(list(command), cwd)
                returncode, stdout = rule_returncode, rule_stdout or ""
                break

        if check and returncode != 0:
            raise CommandFailedError(list(command), returncode)

        return ProcessResult(returncode=returncode, stdout=stdout if capture else None)

    def commands_with(self, *tokens: str) -> List[List[str]]:
        """Recorded commands containing all `tokens`."""
        return [c for c in self.calls if all(token in c for token in tokens)]


def default_environ(prefix: str = "STELLAR", **overrides: Optional[str]) -> Dict[str, str]:
    """Environment for a testnet deployment; an override of None removes the variable."""
    environ = {
        f"{prefix}_ACCOUNT": "alice",
        f"{prefix}_NETWORK": "testnet",
        f"{prefix}_NETWORK_PASSPHRASE": TESTNET_PASSPHRASE,
        f"{prefix}_RPC_URL": "https://soroban-testnet.stellar.org",
    }
    for suffix, value in overrides.items():
        key = f"{prefix}_{suffix.upper()}"
        if value is None:
            environ.pop(key, None)
        else:
            environ[key] = value
    return environ


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_settings(project_root: Path) -> Callable[..., Settings]:
    """Factory building Settings for a profile with an explicit environment."""

    def _make(profile: str = "stellar", **overrides: Any) -> Settings:
        prefix = "STELLAR" if profile == "stellar" else "SOROBAN"
        return load_settings(project_root, profile, environ=default_environ(prefix, **overrides))

    return _make


@pytest.fixture
def build_dir(project_root: Path) -> Path:
    """Created build output directory."""
    path = project_root / BUILD_DIR
    path.mkdir(parents=True)
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


def write_json_record(records_dir: Path, alias: str, ids: Dict[str, str]) -> Path:
    """Write a deployment record the way `contract deploy --alias` does."""
    records_dir.mkdir(parents=True, exist_ok=True)
    path = records_dir / f"{alias}.json"
    path.write_text(json.dumps({"ids": ids}))
    return path


def recording_deployer(
    records_dir: Path, network_key: str, contract_ids: Dict[str, str]
) -> Callable[[List[str], Optional[Path]], None]:
    """Side effect mimicking `contract deploy --alias` by writing a JSON record."""

    def _deploy(command: List[str], cwd: Optional[Path]) -> None:
        alias = command[command.index("--alias") + 1]
        write_json_record(records_dir, alias, {network_key: contract_ids[alias]})

    return _deploy

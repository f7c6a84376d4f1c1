"""Unit tests for path helper functions."""

from pathlib import Path

import pytest

from stellar_initialize.paths import (
    alias_from_path,
    get_build_dir,
    get_contracts_dir,
    get_package_dir,
    get_records_dir,
)


class TestAliasFromPath:
    """Test the alias_from_path function."""

    def test_strips_extension(self):
        """Test that token.wasm becomes token."""
        assert alias_from_path("token.wasm") == "token"

    def test_strips_only_final_extension(self):
        """Test that only the last extension is removed."""
        assert alias_from_path("token.release.wasm") == "token.release"

    def test_ignores_directories(self):
        """Test that the directory part of the path is dropped."""
        assert alias_from_path(Path("/a/b/.stellar/contract-ids/hello_world.json")) == "hello_world"

    @pytest.mark.parametrize("filename", ["alpha.wasm", "alpha.json", "alpha.txt"])
    def test_deterministic_across_kinds(self, filename: str):
        """Test that artifacts and records of one contract share an alias."""
        assert alias_from_path(filename) == "alpha"


class TestProjectPaths:
    """Test project directory helpers."""

    def test_build_dir(self, make_settings, project_root: Path):
        """Test the build output location."""
        assert get_build_dir(make_settings()) == project_root / "target/wasm32-unknown-unknown/release"

    def test_records_dir_follows_profile(self, make_settings, project_root: Path):
        """Test that the records directory depends on the profile."""
        assert get_records_dir(make_settings("stellar")) == project_root / ".stellar/contract-ids"
        assert get_records_dir(make_settings("soroban")) == project_root / ".soroban/contract-ids"

    def test_package_dir(self, make_settings, project_root: Path):
        """Test the generated package location."""
        assert get_package_dir(make_settings(), "token") == project_root / "packages" / "token"

    def test_contracts_dir(self, make_settings, project_root: Path):
        """Test the import file location."""
        assert get_contracts_dir(make_settings()) == project_root / "src" / "contracts"

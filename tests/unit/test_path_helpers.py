"""Unit tests for path helper functions."""

from pathlib import Path

from cosmwasm_local_deploy.paths import (
    get_build_cache_volume,
    get_built_artifact_path,
    get_container_artifact_path,
    get_contract_dir,
)


class TestGetContractDir:
    """Test the get_contract_dir function."""

    def test_default_is_parent_of_working_directory(self, tmp_path: Path, monkeypatch):
        """Test that '..' resolves one directory above the working directory."""
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        monkeypatch.chdir(scripts)

        assert get_contract_dir("..") == tmp_path.resolve()

    def test_explicit_cwd(self, tmp_path: Path):
        """Test resolving against an explicit base directory."""
        assert get_contract_dir("contract", cwd=tmp_path) == (tmp_path / "contract").resolve()

    def test_absolute_path_is_kept(self, tmp_path: Path):
        """Test that absolute paths ignore the base directory."""
        assert get_contract_dir(str(tmp_path), cwd=Path("/somewhere/else")) == tmp_path.resolve()

    def test_returns_absolute_path(self):
        """Test that returned path is absolute."""
        assert get_contract_dir("..").is_absolute()


class TestArtifactPaths:
    """Test artifact path helpers."""

    def test_built_artifact_under_artifacts_dir(self, tmp_path: Path):
        """Test the optimizer's output naming convention."""
        path = get_built_artifact_path(tmp_path, "cosmos_chess")
        assert path == tmp_path / "artifacts" / "cosmos_chess.wasm"

    def test_container_artifact_at_filesystem_root(self):
        """Test the staged path inside the container."""
        assert get_container_artifact_path("cosmos_chess") == "/cosmos_chess.wasm"


class TestGetBuildCacheVolume:
    """Test the get_build_cache_volume function."""

    def test_keyed_by_base_name(self):
        """Test that the volume is named after the source tree's base name."""
        assert get_build_cache_volume(Path("/home/dev/cosmos-chess")) == "cosmos-chess_cache"

    def test_consistent_across_calls(self):
        """Test that repeated runs reuse the same volume."""
        path = Path("/home/dev/cosmos-chess")
        assert get_build_cache_volume(path) == get_build_cache_volume(path)

"""Tests for workspace listing."""

from pathlib import Path
from unittest.mock import patch

from eshttp.operations import default_workspace_roots
from eshttp.operations import list_workspaces


class TestDefaultWorkspaceRoots:
    """Tests for default_workspace_roots()."""

    def test_process_local_root_comes_first(self, tmp_path):
        """Test that the cwd-relative root is listed before the user config root."""
        roots = default_workspace_roots(tmp_path)

        assert roots[0] == tmp_path / ".eshttp" / "workspaces"

    def test_user_config_root_uses_platformdirs(self, tmp_path):
        """Test that the second root lives in the user config directory."""
        with patch(
            "eshttp.operations.workspaces.user_config_path",
            return_value=Path("/config/eshttp"),
        ) as mock_config:
            roots = default_workspace_roots(tmp_path)

        mock_config.assert_called_once()
        assert roots[1] == Path("/config/eshttp/workspaces")

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        """Test that cwd is used when no directory is given."""
        monkeypatch.chdir(tmp_path)

        roots = default_workspace_roots()

        assert roots[0] == Path.cwd() / ".eshttp" / "workspaces"


class TestListWorkspaces:
    """Tests for list_workspaces()."""

    def test_no_roots(self):
        """Test that no roots means no workspaces."""
        assert list_workspaces([]) == []

    def test_missing_roots_are_skipped(self, root):
        """Test that roots that don't exist are ignored."""
        assert list_workspaces([root / "missing"]) == []

    def test_lists_directories_one_level_deep(self, root):
        """Test that each directory directly in a root is a workspace."""
        (root / "beta" / "nested").mkdir(parents=True)
        (root / "alpha").mkdir()
        (root / "file.txt").touch()

        workspaces = list_workspaces([root])

        assert [w.name for w in workspaces] == ["alpha", "beta"]
        assert workspaces[0].uri == root / "alpha"
        assert workspaces[0].id == f"workspace:{root / 'alpha'}"

    def test_roots_are_scanned_in_order(self, tmp_path):
        """Test that workspaces from earlier roots come first."""
        first = tmp_path.resolve() / "first"
        second = tmp_path.resolve() / "second"
        (first / "zeta").mkdir(parents=True)
        (second / "alpha").mkdir(parents=True)

        workspaces = list_workspaces([first, second])

        assert [w.name for w in workspaces] == ["zeta", "alpha"]

    def test_deduplicates_by_canonical_uri(self, tmp_path):
        """Test that the same directory reached twice is listed once."""
        base = tmp_path.resolve()
        (base / "roots" / "shared").mkdir(parents=True)
        (base / "other").mkdir()
        (base / "other" / "shared_link").symlink_to(base / "roots" / "shared")

        workspaces = list_workspaces([base / "roots", base / "roots", base / "other"])

        assert len(workspaces) == 1
        assert workspaces[0].name == "shared"
        assert workspaces[0].uri == base / "roots" / "shared"

    def test_uris_are_canonical(self, tmp_path):
        """Test that a root reached through a symlink yields canonical uris."""
        base = tmp_path.resolve()
        (base / "real" / "ws").mkdir(parents=True)
        (base / "link").symlink_to(base / "real")

        (workspace,) = list_workspaces([base / "link"])

        assert workspace.uri == base / "real" / "ws"

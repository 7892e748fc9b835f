"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from eshttp import __version__
from eshttp.cli import app
from eshttp.files import CONFIG_FILENAME

runner = CliRunner()


class TestVersion:
    """Tests for --version."""

    def test_prints_version(self):
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestWorkspacesCommand:
    """Tests for the workspaces command."""

    def test_lists_workspaces_in_given_roots(self, root):
        """Test listing workspaces from an explicit root."""
        (root / "alpha").mkdir()
        (root / "beta").mkdir()

        result = runner.invoke(app, ["workspaces", "--root", str(root)])

        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "beta" in result.output

    def test_json_output(self, root):
        """Test that --json prints serialized workspaces."""
        (root / "alpha").mkdir()

        result = runner.invoke(app, ["workspaces", "--root", str(root), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "id": f"workspace:{root / 'alpha'}",
                "name": "alpha",
                "uri": str(root / "alpha"),
            }
        ]

    def test_no_workspaces(self, root):
        """Test the message when nothing is found."""
        result = runner.invoke(app, ["workspaces", "--root", str(root / "missing")])

        assert result.exit_code == 0
        assert "No workspaces found" in result.output


class TestCollectionsCommand:
    """Tests for the collections command."""

    def test_lists_collections(self, root):
        """Test that discovered collections are printed with a summary."""
        (root / "users").mkdir()
        (root / "users" / "get.http").write_text("GET /")

        result = runner.invoke(app, ["collections", str(root)])

        assert result.exit_code == 0
        assert "users" in result.output
        assert "1 collection in root" in result.output

    def test_json_output(self, root):
        """Test that --json prints serialized collections."""
        (root / "get.http").write_text("GET /")

        result = runner.invoke(app, ["collections", str(root), "--json"])

        assert result.exit_code == 0
        (collection,) = json.loads(result.output)
        assert collection["name"] == "root"
        assert collection["uri"] == str(root)

    def test_malformed_config_fails(self, root):
        """Test that a bad config is reported and exits 1."""
        (root / CONFIG_FILENAME).write_text("{oops")

        result = runner.invoke(app, ["collections", str(root)])

        assert result.exit_code == 1
        assert "Config error" in result.output
        assert CONFIG_FILENAME in result.output

    def test_missing_workspace_fails(self, root):
        """Test that a workspace path must exist."""
        result = runner.invoke(app, ["collections", str(root / "missing")])

        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestRequestsCommand:
    """Tests for the requests command."""

    def test_prints_tree(self, root):
        """Test that collections and request titles are printed."""
        (root / "users").mkdir()
        (root / "users" / "get-user.http").write_text("GET /")

        result = runner.invoke(app, ["requests", str(root)])

        assert result.exit_code == 0
        assert "users" in result.output
        assert "get-user" in result.output
        assert "1 collection, 1 request\n" in result.output

    def test_summary_pluralizes_counts(self, root):
        """Test that the summary line uses plurals for counts other than one."""
        for name in ("a", "b"):
            (root / name).mkdir()
            (root / name / "get.http").write_text("GET /")
            (root / name / "post.http").write_text("POST /")

        result = runner.invoke(app, ["requests", str(root)])

        assert result.exit_code == 0
        assert "2 collections, 4 requests" in result.output

    def test_json_output(self, root):
        """Test that --json prints the serialized tree."""
        (root / "get.http").write_text("GET /")

        result = runner.invoke(app, ["requests", str(root), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["collections"][0]["requests"][0]["title"] == "get"


class TestReadWriteCommands:
    """Tests for the read and write commands."""

    def test_write_then_read(self, root):
        """Test writing with --content and reading it back."""
        write = runner.invoke(
            app, ["write", str(root), "api/get.http", "--content", "GET /"]
        )
        read = runner.invoke(app, ["read", str(root), "api/get.http"])

        assert write.exit_code == 0
        assert read.exit_code == 0
        assert read.output == "GET /"

    def test_write_from_stdin(self, root):
        """Test that content defaults to stdin."""
        result = runner.invoke(app, ["write", str(root), "a.http"], input="POST /\n")

        assert result.exit_code == 0
        assert (root / "a.http").read_text() == "POST /\n"

    def test_read_missing_file(self, root):
        """Test that reading a missing file exits 1."""
        result = runner.invoke(app, ["read", str(root), "missing.http"])

        assert result.exit_code == 1
        assert "Not found" in result.output

    def test_read_traversal_fails(self, root):
        """Test that ".." is rejected."""
        result = runner.invoke(app, ["read", str(root), "../etc/passwd"])

        assert result.exit_code == 1
        assert "must not contain '..'" in result.output

    def test_read_symlink_escape_fails(self, root, outside):
        """Test that a symlink out of root is reported as a security violation."""
        (root / "leak").symlink_to(outside / "secret.txt")

        result = runner.invoke(app, ["read", str(root), "leak"])

        assert result.exit_code == 1
        assert "Security violation" in result.output
        assert "top secret" not in result.output

    def test_read_binary_file_fails_cleanly(self, root):
        """Test that a non-UTF-8 file is reported without a traceback."""
        (root / "bin.http").write_bytes(b"\xff\xfe\x00bad")

        result = runner.invoke(app, ["read", str(root), "bin.http"])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_write_through_symlinked_directory_fails(self, root, outside):
        """Test that writing through a symlinked directory is refused."""
        (root / "dir").symlink_to(outside)

        result = runner.invoke(
            app, ["write", str(root), "dir/x.txt", "--content", "x"]
        )

        assert result.exit_code == 1
        assert "Security violation" in result.output
        assert not (outside / "x.txt").exists()


class TestEnvCommand:
    """Tests for the env command."""

    def test_prints_environment(self, root):
        """Test printing an environment file verbatim."""
        (root / ".env.dev").write_text("HOST=localhost\n")

        result = runner.invoke(app, ["env", str(root), "dev"])

        assert result.exit_code == 0
        assert result.output == "HOST=localhost\n"

    def test_parse_option(self, root):
        """Test that --parse prints variables as JSON."""
        (root / ".env.dev").write_text("HOST=localhost\nPORT='8080'\n")

        result = runner.invoke(app, ["env", str(root), "dev", "--parse"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"HOST": "localhost", "PORT": "8080"}

    def test_invalid_name(self, root):
        """Test that an invalid environment name exits 1."""
        result = runner.invoke(app, ["env", str(root), "../prod"])

        assert result.exit_code == 1
        assert "Invalid environment name" in result.output

    def test_missing_environment(self, root):
        """Test that a missing environment exits 1."""
        result = runner.invoke(app, ["env", str(root), "prod"])

        assert result.exit_code == 1
        assert "No environment named 'prod'" in result.output

"""
Tests for version materialization and work tree initialisation.
"""

import pytest

from push_deploy.api.exceptions import CheckoutError, PreconditionError, VersionExistsError
from push_deploy.core.materializer import VersionMaterializer, check_commit_id, select_init_command
from push_deploy.utils import git_utils

from conftest import git, requires_git


class TestSelectInitCommand:

    def test_override_wins(self, tmp_path):
        (tmp_path / "package.json").write_text("{}")

        assert select_init_command(tmp_path, "make deploy") == "make deploy"

    def test_node_manifest(self, tmp_path):
        (tmp_path / "package.json").write_text("{}")
        (tmp_path / "Makefile").write_text("install:\n")

        assert select_init_command(tmp_path) == "npm install"

    def test_makefile(self, tmp_path):
        (tmp_path / "Makefile").write_text("install:\n")
        (tmp_path / "setup.py").write_text("")

        assert select_init_command(tmp_path) == "make install"

    def test_setup_script(self, tmp_path):
        (tmp_path / "setup.py").write_text("")

        assert select_init_command(tmp_path) == "python3 setup.py build"

    def test_nothing_to_run(self, tmp_path):
        assert select_init_command(tmp_path) is None


class TestCheckCommitId:

    @pytest.mark.parametrize("commit", ["", ".", "..", "feature/x", "../escape", "a\0b"])
    def test_rejects_unusable_names(self, commit):
        with pytest.raises(PreconditionError):
            check_commit_id(commit)

    def test_accepts_plain_ids(self):
        check_commit_id("3f2a9c1d0e8b")
        check_commit_id("v1.2")


class TestMaterialize:

    def test_creates_work_dir_and_checks_out(self, resolver, checkouts):
        work = VersionMaterializer(resolver).materialize("abc")

        assert work == resolver.get_work_dir("abc")
        assert (work / "COMMIT").read_text() == "abc"
        assert checkouts == [(resolver.repo_dir, work, "abc")]

    def test_creates_versions_dir_when_missing(self, resolver, base, checkouts):
        (base / "versions").rmdir()

        VersionMaterializer(resolver).materialize("abc")

        assert resolver.get_work_dir("abc").is_dir()

    def test_existing_commit_dir_is_conflict(self, resolver, checkouts):
        resolver.get_commit_dir("abc").mkdir()

        with pytest.raises(VersionExistsError) as exc_info:
            VersionMaterializer(resolver).materialize("abc")

        assert exc_info.value.commit == "abc"
        assert not resolver.get_work_dir("abc").exists()
        assert checkouts == []

    def test_second_materialize_fails_without_touching_first(self, resolver, checkouts):
        materializer = VersionMaterializer(resolver)
        work = materializer.materialize("abc")

        with pytest.raises(VersionExistsError):
            materializer.materialize("abc")

        assert (work / "COMMIT").read_text() == "abc"
        assert len(checkouts) == 1

    def test_slash_in_commit_is_rejected(self, resolver, base, checkouts):
        with pytest.raises(PreconditionError):
            VersionMaterializer(resolver).materialize("feature/x")

        assert not (base / "versions" / "feature").exists()
        assert checkouts == []

    def test_checkout_failure_propagates(self, resolver, monkeypatch):
        def failing_checkout(repo_dir, work_tree, commit):
            raise CheckoutError(commit, "fatal: reference is not a tree")

        monkeypatch.setattr(git_utils, "checkout", failing_checkout)

        with pytest.raises(CheckoutError):
            VersionMaterializer(resolver).materialize("bad")

        # partial directories are left for inspection
        assert resolver.get_work_dir("bad").is_dir()


class TestInitialize:

    def test_runs_override_in_work_dir(self, tmp_path, resolver):
        result = VersionMaterializer(resolver).initialize(tmp_path, "echo done; touch marker")

        assert result.performed
        assert result.succeeded
        assert (tmp_path / "marker").exists()
        assert "done" in result.output

    def test_captures_stderr_and_status(self, tmp_path, resolver):
        result = VersionMaterializer(resolver).initialize(tmp_path, "echo oops >&2; exit 3")

        assert result.returncode == 3
        assert not result.succeeded
        assert "oops" in result.output

    def test_undecodable_output_is_replaced(self, tmp_path, resolver):
        result = VersionMaterializer(resolver).initialize(tmp_path, r"printf 'caf\351\n\377'")

        assert result.succeeded
        assert result.output.startswith("caf")
        assert "\ufffd" in result.output

    def test_no_command_is_reported(self, tmp_path, resolver, caplog):
        with caplog.at_level("WARNING"):
            result = VersionMaterializer(resolver).initialize(tmp_path)

        assert not result.performed
        assert result.succeeded
        assert "No initialisation performed" in caplog.text


@requires_git
class TestRealCheckout:
    """Checkout against a real bare repository."""

    def test_checkout_commit(self, tmp_path, resolver):
        source = tmp_path / "source"
        source.mkdir()
        git("init", "-q", str(source))
        (source / "hello.txt").write_text("hello\n")
        git("add", "hello.txt", cwd=source)
        git("commit", "-q", "-m", "first", cwd=source)
        commit = git("rev-parse", "HEAD", cwd=source)
        resolver.repo_dir.rmdir()
        git("clone", "-q", "--bare", str(source), str(resolver.repo_dir))

        work = VersionMaterializer(resolver).materialize(commit)

        assert (work / "hello.txt").read_text() == "hello\n"

    def test_unknown_commit(self, tmp_path, resolver):
        resolver.repo_dir.rmdir()
        git("init", "-q", "--bare", str(resolver.repo_dir))

        with pytest.raises(CheckoutError):
            VersionMaterializer(resolver).materialize("0123456789abcdef")

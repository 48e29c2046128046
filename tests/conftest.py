"""Shared fixtures for push-deploy tests."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from push_deploy.core.path_resolver import PathResolver
from push_deploy.models.config import DeployConfig
from push_deploy.utils import git_utils


requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git binary not available"
)


class FakeServiceManager:
    """Records service manager calls instead of running systemctl."""

    def __init__(self, running=(), fail_on=None):
        self.running = set(running)
        self.fail_on = fail_on
        self.calls = []
        self.is_active_calls = []

    def _record(self, call):
        self.calls.append(call)
        if self.fail_on == call[0]:
            from push_deploy.api.exceptions import ServiceManagerError
            raise ServiceManagerError(["systemctl", call[0]], "simulated failure")

    def stop(self, services, wait=True):
        self._record(("stop", tuple(services), wait))

    def start(self, services):
        self._record(("start", tuple(services)))

    def reload(self):
        self._record(("reload",))

    def is_active(self, service):
        self.is_active_calls.append(service)
        return service in self.running


@pytest.fixture
def base(tmp_path):
    """An empty deployment base with repo.git and versions/."""
    root = tmp_path / "app"
    (root / "repo.git").mkdir(parents=True)
    (root / "versions").mkdir()
    return root


@pytest.fixture
def resolver(base):
    return PathResolver(base)


@pytest.fixture
def unit_dir(tmp_path):
    """A stand-in for /etc/systemd/system."""
    path = tmp_path / "systemd"
    (path / "system").mkdir(parents=True)
    return path


@pytest.fixture
def web_dir(tmp_path):
    """A stand-in for /etc/apache2."""
    path = tmp_path / "apache2"
    (path / "sites-enabled").mkdir(parents=True)
    return path


@pytest.fixture
def config(unit_dir, web_dir):
    return DeployConfig(
        systemd_dirs=[str(unit_dir)],
        apache2_dirs=[str(web_dir)],
        use_sudo=False,
    )


@pytest.fixture
def checkouts(monkeypatch):
    """Replace git checkout with one writing a marker file.

    Returns the list of (repo_dir, work_tree, commit) calls.
    """
    calls = []

    def fake_checkout(repo_dir, work_tree, commit):
        calls.append((Path(repo_dir), Path(work_tree), commit))
        (Path(work_tree) / "COMMIT").write_text(commit)

    monkeypatch.setattr(git_utils, "checkout", fake_checkout)
    return calls


def git(*args, cwd=None):
    """Run git for test setup, returning stdout."""
    env = dict(os.environ)
    env.update({
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    })
    result = subprocess.run(
        ["git", *args], cwd=cwd, env=env,
        capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the caller's push-deploy settings out of tests."""
    monkeypatch.delenv("PUSH_DEPLOY_CONFIG", raising=False)
    monkeypatch.delenv("PUSH_DEPLOY_LOG_LEVEL", raising=False)

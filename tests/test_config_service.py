"""
Tests for configuration loading.
"""

import pytest

from push_deploy.api.exceptions import ConfigError
from push_deploy.constants import DEFAULT_APACHE2_DIRS, DEFAULT_SYSTEMD_DIRS
from push_deploy.models.config import DeployConfig, split_path_list
from push_deploy.services.config_service import ConfigService


class TestSplitPathList:

    def test_colon_separated(self):
        assert split_path_list("/a:/b::/c") == ["/a", "/b", "/c"]

    def test_list_passthrough(self):
        assert split_path_list(["/a", "", "/b"]) == ["/a", "/b"]

    def test_none(self):
        assert split_path_list(None) == []

    def test_rejects_other_types(self):
        with pytest.raises(ConfigError):
            split_path_list(42)


class TestDeployConfig:

    def test_defaults(self):
        config = DeployConfig()

        assert config.init_command is None
        assert config.systemd_dirs == DEFAULT_SYSTEMD_DIRS
        assert config.apache2_dirs == DEFAULT_APACHE2_DIRS
        assert config.web_server_service == "apache2"
        assert config.primary_ref == "refs/heads/master"

    def test_defaults_not_shared(self):
        first = DeployConfig()
        first.systemd_dirs.append("/tmp")

        assert "/tmp" not in DeployConfig().systemd_dirs

    def test_from_dict(self):
        config = DeployConfig.from_dict({
            "init": "make build",
            "systemd_dirs": "/x:/y",
            "apache2_dirs": [],
            "primary_ref": "refs/heads/main",
            "use_sudo": False,
        })

        assert config.init_command == "make build"
        assert config.systemd_dirs == ["/x", "/y"]
        assert config.apache2_dirs == []
        assert config.primary_ref == "refs/heads/main"
        assert config.use_sudo is False

    def test_to_dict_round_trip(self):
        config = DeployConfig(init_command="npm ci", systemd_dirs=["/u"])

        assert DeployConfig.from_dict(config.to_dict()) == config

    def test_rejects_non_mapping(self):
        with pytest.raises(ConfigError):
            DeployConfig.from_dict(["not", "a", "mapping"])

    def test_rejects_empty_primary_ref(self):
        with pytest.raises(ConfigError):
            DeployConfig(primary_ref="")


    def test_rejects_quoted_boolean(self):
        with pytest.raises(ConfigError):
            DeployConfig.from_dict({"use_sudo": "false"})

    def test_rejects_non_string_service(self):
        with pytest.raises(ConfigError):
            DeployConfig(web_server_service=5)

    def test_yaml_booleans_accepted(self, base):
        (base / "push-deploy.yaml").write_text("use_sudo: false\nwait_for_lock: false\n")

        config = ConfigService(base).load()

        assert config.use_sudo is False
        assert config.wait_for_lock is False


class TestConfigService:

    def test_missing_file_gives_defaults(self, base):
        assert ConfigService(base).load() == DeployConfig()

    def test_reads_yaml(self, base):
        (base / "push-deploy.yaml").write_text(
            "init: make install-prod\n"
            "systemd_dirs:\n"
            "  - /srv/units\n"
            "web_server_service: httpd\n"
        )

        config = ConfigService(base).load()

        assert config.init_command == "make install-prod"
        assert config.systemd_dirs == ["/srv/units"]
        assert config.web_server_service == "httpd"

    def test_expands_environment(self, base, monkeypatch):
        monkeypatch.setenv("UNIT_ROOT", "/opt/units")
        (base / "push-deploy.yaml").write_text("systemd_dirs: $UNIT_ROOT:/etc/systemd/system\n")

        config = ConfigService(base).load()

        assert config.systemd_dirs == ["/opt/units", "/etc/systemd/system"]

    def test_overrides_win(self, base):
        (base / "push-deploy.yaml").write_text("init: make\napache2_dirs: /a\n")

        config = ConfigService(base).load(
            init_command="npm ci",
            systemd_dirs="/s1:/s2",
            apache2_dirs=""
        )

        assert config.init_command == "npm ci"
        assert config.systemd_dirs == ["/s1", "/s2"]
        assert config.apache2_dirs == []

    def test_config_path_from_environment(self, base, tmp_path, monkeypatch):
        other = tmp_path / "elsewhere.yaml"
        other.write_text("primary_ref: refs/heads/main\n")
        monkeypatch.setenv("PUSH_DEPLOY_CONFIG", str(other))

        assert ConfigService(base).load().primary_ref == "refs/heads/main"

    def test_invalid_yaml(self, base):
        (base / "push-deploy.yaml").write_text("init: [unclosed\n")

        with pytest.raises(ConfigError):
            ConfigService(base).load()

    def test_non_mapping_yaml(self, base):
        (base / "push-deploy.yaml").write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            ConfigService(base).load()

    def test_save_then_load(self, base):
        service = ConfigService(base)
        config = DeployConfig(init_command="make", systemd_dirs=["/u"], use_sudo=False)

        service.save(config)

        assert service.load() == config

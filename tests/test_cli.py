"""
Tests for the ovh-credential command line
"""

import logging

from typer.testing import CliRunner

from ovh_credential.main import app

runner = CliRunner()


class TestShow:
    def test_show_masks_secrets(self, config_file):
        result = runner.invoke(app, ["show", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "eu.api.ovh.com" in result.output
        assert '"application_key": "ak"' in result.output
        assert '"consumer_key": "****"' in result.output
        assert '"ck"' not in result.output

    def test_show_reveal(self, config_file):
        result = runner.invoke(app, ["show", "--config", str(config_file), "--reveal"])

        assert result.exit_code == 0
        assert '"application_secret": "as"' in result.output
        assert '"consumer_key": "ck"' in result.output

    def test_show_uses_default_file(self, config_file, monkeypatch):
        monkeypatch.chdir(config_file.parent)

        result = runner.invoke(app, ["show"])

        assert result.exit_code == 0
        assert "eu.api.ovh.com" in result.output

    def test_show_missing_file(self, tmp_path):
        result = runner.invoke(app, ["show", "--config", str(tmp_path / "nope.toml")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_show_missing_field(self, write_config):
        path = write_config('[default]\nendpoint = "ovh-eu"\n')

        result = runner.invoke(app, ["show", "-c", str(path)])

        assert result.exit_code == 1
        assert "ovh-eu" in result.output


class TestEndpoints:
    def test_endpoints_lists_table(self):
        result = runner.invoke(app, ["endpoints"])

        assert result.exit_code == 0
        assert "soyoustart-eu" in result.output
        assert "eu.api.soyoustart.com" in result.output
        assert "api.ovh.com" in result.output

    def test_host_known(self):
        result = runner.invoke(app, ["host", "kimsufi-eu"])

        assert result.exit_code == 0
        assert "eu.api.kimsufi.com" in result.output
        assert "Unknown endpoint" not in result.output

    def test_host_unknown_warns(self):
        result = runner.invoke(app, ["host", "nowhere"])

        assert result.exit_code == 0
        assert "Unknown endpoint" in result.output
        assert "api.ovh.com" in result.output

    def test_verbose_flag(self, config_file, restore_logging):
        result = runner.invoke(app, ["--verbose", "show", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "DEBUG" in result.output
        assert "Endpoint ovh-eu resolved to eu.api.ovh.com" in result.output

    def test_no_debug_output_without_verbose(self, config_file):
        result = runner.invoke(app, ["show", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "DEBUG" not in result.output
        assert "resolved to" not in result.output
        assert logging.getLogger("ovh_credential").level == logging.NOTSET

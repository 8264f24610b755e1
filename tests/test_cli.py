"""Tests for the pkgscore command line."""

import json
import logging

import pytest
from typer.testing import CliRunner

from pkgscore import cli
from pkgscore.exceptions import ManifestLoadError

runner = CliRunner()


@pytest.fixture
def package_dir(tmp_path, complete_manifest):
    (tmp_path / "package.json").write_text(json.dumps(complete_manifest))
    return tmp_path


def test_score_table(package_dir):
    result = runner.invoke(cli.app, ["score", str(package_dir)])

    assert result.exit_code == 0
    assert "package_has_test_script" in result.output
    assert "26/26" in result.output


def test_score_json(package_dir):
    result = runner.invoke(cli.app, ["score", str(package_dir), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["overall"] == {"score": 26.0, "total": 26.0}
    assert data["scores"]["package_has_author"] == [1.0, 1.0]


def test_score_missing_manifest(tmp_path):
    result = runner.invoke(cli.app, ["score", str(tmp_path)])
    assert result.exit_code == 1


def test_score_rule_fault(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"version": "1.0.0"}))

    result = runner.invoke(cli.app, ["score", str(tmp_path)])
    assert result.exit_code == 2
    assert "packagename_does_not_include_node" in result.output


def test_npm_command(monkeypatch, complete_manifest):
    requested = []

    async def fake_fetch(self, name, version=None):
        requested.append((name, version))
        return complete_manifest

    monkeypatch.setattr(cli.NpmRegistryLoader, "fetch", fake_fetch)

    result = runner.invoke(cli.app, ["npm", "foo", "--version", "1.2.3", "--json"])

    assert result.exit_code == 0
    assert requested == [("foo", "1.2.3")]
    assert json.loads(result.output)["overall"]["score"] == 26.0


def test_npm_command_load_error(monkeypatch):
    async def fake_fetch(self, name, version=None):
        raise ManifestLoadError(f"npm:{name}", "package not found in registry")

    monkeypatch.setattr(cli.NpmRegistryLoader, "fetch", fake_fetch)

    result = runner.invoke(cli.app, ["npm", "missing-package"])
    assert result.exit_code == 1


def test_rules_listing():
    result = runner.invoke(cli.app, ["rules"])

    assert result.exit_code == 0
    assert "package_has_spdx_license" in result.output
    assert "26" in result.output


def test_version_command():
    from pkgscore import __version__

    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert f"pkgscore v{__version__}" in result.output


def test_verbose_logs_each_rule(package_dir):
    result = runner.invoke(cli.app, ["score", str(package_dir), "--verbose"])

    assert result.exit_code == 0
    assert logging.getLogger().getEffectiveLevel() == logging.DEBUG
    assert "package_has_test_script: 5.0/5.0" in result.output


def test_quiet_by_default(package_dir):
    result = runner.invoke(cli.app, ["score", str(package_dir)])

    assert result.exit_code == 0
    assert logging.getLogger().getEffectiveLevel() == logging.WARNING
    assert "package_has_test_script: 5.0/5.0" not in result.output

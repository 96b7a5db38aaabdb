"""Tests for the config show and version commands."""

from wikiverify.api.config.cmd_show import cmd_show
from wikiverify.api.config.cmd_version import cmd_version
from wikiverify.api.validate_output import validate_output


def test_lists_sections_with_default_warning(run_cmd, wikiverify_home):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["content"] == {"sections": ["scan", "resolve"]}
    assert result.output["config_exists"] is False
    assert result.output["config_path"] == str(wikiverify_home.resolve() / "config.json")
    assert result.output["warnings"][0].startswith("No configuration file")
    assert validate_output(cmd_show, result.output) == result.output


def test_show_section(run_cmd, write_config):
    write_config({"resolve": {"ignore_example_links": False}})

    result = run_cmd(cmd_show, "resolve")

    assert result.success is True
    assert result.result == "Retrieved configuration for 'resolve'"
    assert result.output["content"] == {"ignore_example_links": False}
    assert result.output["config_exists"] is True
    assert result.output["warnings"] == []


def test_unknown_section(run_cmd):
    result = run_cmd(cmd_show, "database")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: database"]


def test_broken_config(run_cmd, write_config):
    write_config({"scan": {"extensions": []}})

    result = run_cmd(cmd_show, "scan")

    assert result.success is False
    assert result.result == "Configuration could not be loaded"
    assert "at least one extension" in result.output["errors"][0]


def test_version(run_cmd):
    result = run_cmd(cmd_version)

    assert result.success is True
    assert result.output["version"]
    assert result.result == f"wikiverify version: {result.output['version']}"

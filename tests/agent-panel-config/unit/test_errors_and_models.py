"""
Unit tests for the error taxonomy and data models

Tests cover:
- ApCoreError categories, helpers and JSON rendering
- ConfigError kind -> category mapping
- ConfigFinding and ConfigLoadResult behavior
- Model immutability and bounds
- Color palette resolution
"""

import pytest
from pydantic import ValidationError

from agent_panel.errors import (
    ApCoreError,
    ConfigError,
    ConfigErrorKind,
    ConfigLoadError,
    ErrorCategory,
    command_error,
    configuration_error,
    file_system_error,
    parse_error,
    validation_error,
)
from agent_panel.models import (
    Config,
    ConfigFinding,
    ConfigLoadResult,
    FindingSeverity,
    LayoutConfig,
    ProjectColorPalette,
    ProjectColorRGB,
    ProjectConfig,
)


class TestApCoreError:
    """Test ApCoreError and its helper constructors."""

    @pytest.mark.parametrize("factory,category", [
        (validation_error, ErrorCategory.VALIDATION),
        (file_system_error, ErrorCategory.FILE_SYSTEM),
        (configuration_error, ErrorCategory.CONFIGURATION),
        (parse_error, ErrorCategory.PARSE),
    ])
    def test_helpers(self, factory, category):
        error = factory("Something broke")
        assert error.category is category
        assert error.message == "Something broke"
        assert str(error) == "Something broke"

    def test_command_error(self):
        error = command_error("git status", 128, "  fatal: not a git repository\n")

        assert error.category is ErrorCategory.COMMAND
        assert error.exit_code == 128
        assert error.detail == "fatal: not a git repository"
        assert error.to_dict() == {
            "category": "command",
            "message": "git status failed with exit code 128.",
            "detail": "fatal: not a git repository",
            "command": "git status",
            "exit_code": 128,
        }

    def test_command_error_empty_stderr(self):
        assert command_error("true", 1, "   ").detail is None

    def test_to_dict_omits_empty_fields(self):
        assert parse_error("Bad TOML").to_dict() == {"category": "parse", "message": "Bad TOML"}

    def test_equality(self):
        assert validation_error("x") == validation_error("x")
        assert validation_error("x") != parse_error("x")


class TestConfigError:
    """Test ConfigError."""

    def test_file_not_found_is_configuration(self):
        error = ConfigError(ConfigErrorKind.FILE_NOT_FOUND, "/cfg/config.toml", "Config file not found.")

        assert isinstance(error, ApCoreError)
        assert error.category is ErrorCategory.CONFIGURATION
        assert error.to_dict() == {
            "category": "configuration",
            "message": "Config file not found.",
            "kind": "fileNotFound",
            "path": "/cfg/config.toml",
        }

    @pytest.mark.parametrize("kind", [ConfigErrorKind.CREATE_FAILED, ConfigErrorKind.READ_FAILED])
    def test_io_failures_are_file_system(self, kind):
        error = ConfigError(kind, "/cfg/config.toml", "Failed", detail="Permission denied")
        assert error.category is ErrorCategory.FILE_SYSTEM
        assert error.to_dict()["detail"] == "Permission denied"

    def test_config_load_error_findings(self):
        finding = ConfigFinding.fail("layout.maxGap must be 0-100", detail="Got 200.")
        error = ConfigLoadError(ErrorCategory.VALIDATION, "Config has 1 error(s)", findings=[finding])

        assert error.findings == (finding,)
        assert error.to_dict()["findings"] == [
            {"severity": "FAIL", "title": "layout.maxGap must be 0-100", "detail": "Got 200."}
        ]


class TestConfigFinding:
    """Test ConfigFinding."""

    def test_constructors(self):
        fail = ConfigFinding.fail("Broken", fix="Fix it")
        warn = ConfigFinding.warn("Odd")

        assert fail.severity is FindingSeverity.FAIL
        assert fail.is_failure
        assert warn.severity is FindingSeverity.WARN
        assert not warn.is_failure
        assert str(fail) == "FAIL: Broken"

    def test_immutable(self):
        finding = ConfigFinding.warn("Odd")
        with pytest.raises(ValidationError):
            finding.title = "Changed"

    def test_title_required(self):
        with pytest.raises(ValidationError):
            ConfigFinding(severity=FindingSeverity.PASS, title="")


class TestModels:
    """Test config models."""

    def test_layout_bounds_enforced(self):
        with pytest.raises(ValidationError):
            LayoutConfig(window_height=0)
        with pytest.raises(ValidationError):
            LayoutConfig(max_gap=101)

    def test_aliases(self):
        """Test camelCase TOML keys are accepted and dumped."""
        layout = LayoutConfig(windowHeight=50)
        assert layout.window_height == 50
        assert layout.model_dump(by_alias=True)["windowHeight"] == 50

    def test_config_dump_uses_toml_keys(self):
        config = Config(projects=[ProjectConfig(id="app", name="App", path="/app", color="red")])
        dumped = config.model_dump(mode="json", by_alias=True)

        assert set(dumped) == {"app", "agentLayer", "chrome", "layout", "project"}
        assert dumped["project"][0]["useAgentLayer"] is False
        assert dumped["layout"]["idePosition"] == "left"

    def test_load_result_properties(self):
        result = ConfigLoadResult(
            config=Config(),
            findings=[ConfigFinding.warn("Odd"), ConfigFinding.fail("Broken")],
        )

        assert [f.title for f in result.warnings] == ["Odd"]
        assert [f.title for f in result.failures] == ["Broken"]
        assert result.is_valid is False


class TestProjectColorPalette:
    """Test ProjectColorPalette."""

    def test_hex(self):
        assert ProjectColorPalette.resolve("#FF8000") == ProjectColorRGB(red=1.0, green=128 / 255.0, blue=0.0)

    def test_named_case_insensitive(self):
        assert ProjectColorPalette.resolve(" Teal ") == ProjectColorPalette.NAMED["teal"]

    def test_unknown(self):
        assert ProjectColorPalette.resolve("chartreuse") is None

    @pytest.mark.parametrize("value,valid", [
        ("#a1B2c3", True),
        ("#12345", False),
        ("#1234567", False),
        ("123456", False),
        ("#GGGGGG", False),
    ])
    def test_is_valid_hex(self, value, valid):
        assert ProjectColorPalette.is_valid_hex(value) is valid

    def test_gray_and_grey(self):
        assert ProjectColorPalette.NAMED["gray"] == ProjectColorPalette.NAMED["grey"]
        assert len(ProjectColorPalette.SORTED_NAMES) == 15

"""
Unit tests for the global section parsers ([app], [agentLayer], [chrome], [layout])

Tests cover:
- Absent sections give defaults with no findings
- Non-table sections
- Layout bounds and enum checks with whole-section fallback
- Chrome URL checks with whole-section fallback
- Reader failures only default the affected field
"""

import tomllib

from agent_panel.core.sections import (
    parse_agent_layer_section,
    parse_app_section,
    parse_chrome_section,
    parse_layout_section,
)
from agent_panel.models import (
    AgentLayerConfig,
    AppConfig,
    ChromeConfig,
    FindingSeverity,
    IdePosition,
    Justification,
    LayoutConfig,
)


def _root(text: str):
    return tomllib.loads(text)


def _titles(findings):
    return [f.title for f in findings]


class TestAbsentSections:
    """Test every section defaults when absent."""

    def test_defaults(self):
        findings = []
        root = {}

        assert parse_app_section(root, findings) == AppConfig()
        assert parse_agent_layer_section(root, findings) == AgentLayerConfig()
        assert parse_chrome_section(root, findings) == ChromeConfig()
        assert parse_layout_section(root, findings) == LayoutConfig()
        assert findings == []

    def test_layout_default_values(self):
        layout = LayoutConfig()
        assert layout.small_screen_threshold == 24.0
        assert layout.window_height == 90
        assert layout.max_window_width == 18.0
        assert layout.ide_position is IdePosition.LEFT
        assert layout.justification is Justification.RIGHT
        assert layout.max_gap == 10


class TestNonTableSections:
    """Test sections written as plain values."""

    def test_layout_not_a_table(self):
        findings = []
        assert parse_layout_section(_root('layout = "wide"'), findings) == LayoutConfig()
        assert _titles(findings) == ["[layout] must be a table"]

    def test_app_not_a_table(self):
        findings = []
        assert parse_app_section(_root("app = true"), findings) == AppConfig()
        assert findings[0].severity is FindingSeverity.FAIL


class TestAppAndAgentLayer:
    """Test [app] and [agentLayer]."""

    def test_app(self):
        findings = []
        app = parse_app_section(_root("[app]\nautoStartAtLogin = true"), findings)
        assert app.auto_start_at_login is True
        assert findings == []

    def test_app_unknown_key_warns(self):
        findings = []
        app = parse_app_section(_root("[app]\nautoStartAtLogin = true\nlaunchHidden = true"), findings)
        assert app.auto_start_at_login is True
        assert _titles(findings) == ["Unrecognized [app] config key: launchHidden"]
        assert findings[0].severity is FindingSeverity.WARN

    def test_agent_layer_wrong_type(self):
        findings = []
        agent_layer = parse_agent_layer_section(_root('[agentLayer]\nenabled = "yes"'), findings)
        assert agent_layer.enabled is False
        assert _titles(findings) == ["agentLayer.enabled must be a boolean"]


class TestLayoutSection:
    """Test [layout] bounds and fallback."""

    def test_all_fields(self):
        findings = []
        layout = parse_layout_section(_root("""
[layout]
smallScreenThreshold = 27
windowHeight = 100
maxWindowWidth = 20.5
idePosition = "right"
justification = "left"
maxGap = 0
"""), findings)

        assert findings == []
        assert layout.small_screen_threshold == 27.0
        assert layout.window_height == 100
        assert layout.max_window_width == 20.5
        assert layout.ide_position is IdePosition.RIGHT
        assert layout.justification is Justification.LEFT
        assert layout.max_gap == 0

    def test_out_of_range_reverts_whole_section(self):
        """Test windowHeight=150 discards the valid maxGap=5 as well."""
        findings = []
        layout = parse_layout_section(_root("[layout]\nwindowHeight = 150\nmaxGap = 5"), findings)

        assert layout == LayoutConfig()
        assert layout.max_gap == 10
        assert _titles(findings) == ["layout.windowHeight must be 1-100"]
        assert findings[0].detail == "Got 150."

    def test_window_height_zero(self):
        findings = []
        assert parse_layout_section(_root("[layout]\nwindowHeight = 0"), findings) == LayoutConfig()
        assert len(findings) == 1

    def test_max_gap_bounds(self):
        findings = []
        assert parse_layout_section(_root("[layout]\nmaxGap = 101"), findings) == LayoutConfig()
        assert _titles(findings) == ["layout.maxGap must be 0-100"]

    def test_non_positive_threshold(self):
        findings = []
        parse_layout_section(_root("[layout]\nsmallScreenThreshold = 0\nmaxWindowWidth = -3"), findings)
        assert _titles(findings) == [
            "layout.smallScreenThreshold must be > 0",
            "layout.maxWindowWidth must be > 0",
        ]

    def test_nan_threshold_rejected(self):
        findings = []
        assert parse_layout_section(_root("[layout]\nsmallScreenThreshold = nan"), findings) == LayoutConfig()
        assert len(findings) == 1

    def test_invalid_enum(self):
        findings = []
        layout = parse_layout_section(_root('[layout]\nidePosition = "center"\nwindowHeight = 70'), findings)

        assert layout == LayoutConfig()
        assert _titles(findings) == ['layout.idePosition must be "left" or "right"']

    def test_enum_is_case_sensitive(self):
        findings = []
        parse_layout_section(_root('[layout]\njustification = "Left"'), findings)
        assert _titles(findings) == ['layout.justification must be "left" or "right"']

    def test_type_error_defaults_only_that_field(self):
        """Test a float windowHeight keeps the other valid fields."""
        findings = []
        layout = parse_layout_section(_root("[layout]\nwindowHeight = 90.5\nmaxGap = 20"), findings)

        assert layout.window_height == 90
        assert layout.max_gap == 20
        assert _titles(findings) == ["layout.windowHeight must be an integer"]

    def test_unknown_key(self):
        findings = []
        layout = parse_layout_section(_root("[layout]\nmaxGap = 3\ngutter = 4"), findings)
        assert layout.max_gap == 3
        assert _titles(findings) == ["Unrecognized [layout] config key: gutter"]


class TestChromeSection:
    """Test [chrome] URL checks and fallback."""

    def test_valid(self):
        findings = []
        chrome = parse_chrome_section(_root("""
[chrome]
pinnedTabs = ["  https://dash.example.com  "]
defaultTabs = ["http://docs.example.com"]
openGitRemote = true
"""), findings)

        assert findings == []
        assert chrome.pinned_tabs == ("https://dash.example.com",)
        assert chrome.default_tabs == ("http://docs.example.com",)
        assert chrome.open_git_remote is True

    def test_invalid_url_reverts_whole_section(self):
        findings = []
        chrome = parse_chrome_section(_root("""
[chrome]
pinnedTabs = ["not-a-url"]
defaultTabs = ["https://docs.example.com"]
openGitRemote = true
"""), findings)

        assert chrome == ChromeConfig()
        assert len(findings) == 1
        assert findings[0].severity is FindingSeverity.FAIL
        assert "[0]" in findings[0].title

    def test_non_string_tab_is_skipped(self):
        """Test element type errors drop the element, not the section."""
        findings = []
        chrome = parse_chrome_section(_root('[chrome]\npinnedTabs = ["https://a.example", 3]'), findings)

        assert chrome.pinned_tabs == ("https://a.example",)
        assert _titles(findings) == ["chrome.pinnedTabs[1] must be a string"]

    def test_invalid_url_after_skipped_element(self):
        findings = []
        chrome = parse_chrome_section(_root('[chrome]\npinnedTabs = ["https://x", 3, "bad"]'), findings)

        assert chrome == ChromeConfig()
        assert _titles(findings) == [
            "chrome.pinnedTabs[1] must be a string",
            "chrome.pinnedTabs[2] is not a valid URL",
        ]

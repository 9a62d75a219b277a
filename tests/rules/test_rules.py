import pytest
from gridver.rules.rule import Rule
from gridver.rules.version import parse
from gridver.exceptions import RuleError

@pytest.fixture
def versions_to_test():
    """Provides a standard set of versions for testing rules against."""
    return [
        parse("0.9.0"),
        parse("1.0.0"),
        parse("1.0.0-r2"),
        parse("1.5.0"),
        parse("1.9.9"),
        parse("2.0.0"),
        parse("2.0.1"),
    ]

class TestRule:
    """Tests for the Rule class in gridver.rules.rule."""

    @pytest.mark.parametrize("rule_str, expected_true_versions", [
        ("[1.0.0, 2.0.0]", ["1.0.0", "1.0.0-r2", "1.5.0", "1.9.9", "2.0.0"]),
        ("(1.0.0, 2.0.0)", ["1.0.0-r2", "1.5.0", "1.9.9"]),
        ("[1.0.0, 2.0.0)", ["1.0.0", "1.0.0-r2", "1.5.0", "1.9.9"]),
        ("(1.0.0, 2.0.0]", ["1.0.0-r2", "1.5.0", "1.9.9", "2.0.0"]),
        ("[1.0, 1.5]", ["1.0.0", "1.0.0-r2", "1.5.0"]),
    ])
    def test_range_rules(self, rule_str, expected_true_versions, versions_to_test):
        """Test various range rules like [a, b], (a, b), etc."""
        rule = Rule(rule_str)
        for version in versions_to_test:
            should_be_true = version.raw in expected_true_versions
            assert (version in rule) is should_be_true, \
                f"Version {version} in rule '{rule}' should be {should_be_true}"

    @pytest.mark.parametrize("rule_str, expected_true_versions", [
        (">=1.5.0", ["1.5.0", "1.9.9", "2.0.0", "2.0.1"]),
        (">1.5.0", ["1.9.9", "2.0.0", "2.0.1"]),
        ("<=1.5.0", ["0.9.0", "1.0.0", "1.0.0-r2", "1.5.0"]),
        ("<1.5.0", ["0.9.0", "1.0.0", "1.0.0-r2"]),
        (">1.0.0", ["1.0.0-r2", "1.5.0", "1.9.9", "2.0.0", "2.0.1"]),
        (">= 2.0", ["2.0.0", "2.0.1"]),
    ])
    def test_comparison_rules(self, rule_str, expected_true_versions, versions_to_test):
        """Test comparison rules like >=, <, etc."""
        rule = Rule(rule_str)
        for version in versions_to_test:
            should_be_true = version.raw in expected_true_versions
            assert (version in rule) is should_be_true, \
                f"Version {version} in rule '{rule}' should be {should_be_true}"

    def test_exact_match_rule(self, versions_to_test):
        """Exact rules use version equality, so missing fields count as zero."""
        rule = Rule("1.5")
        matched = [v.raw for v in versions_to_test if v in rule]
        assert matched == ["1.5.0"]

    def test_exact_match_revision(self, versions_to_test):
        rule = Rule("1.0.0-r2")
        matched = [v.raw for v in versions_to_test if v in rule]
        assert matched == ["1.0.0-r2"]

    @pytest.mark.parametrize("rule_str, version_str, expected", [
        ("17.*", "17.17134", True),
        ("17.*", "170.1", False),
        ("17.*", "16.16299", False),
        ("10.0.17*", "10.0.17134.1", True),
        ("10.0.17*", "10.0.16299.15", False),
        ("114.*", "Google Chrome 114.0.5735.198", True),
        ("114.0.*", "114.0.5735.198", True),
        ("114.0.*", "114.1.0", False),
    ])
    def test_prefix_rules(self, rule_str, version_str, expected):
        """Prefix rules compare the leading dotted fields of the version."""
        assert Rule(rule_str).matches(version_str) is expected

    def test_opera_threshold(self):
        """Only Opera builds newer than 12.15 use the chromium driver."""
        rule = Rule(">12.15")
        assert rule.matches("Opera 68.0.3618.63")
        assert not rule.matches("Opera 12.15")
        assert not rule.matches("Opera 12.14.1")

    def test_matches_accepts_strings(self):
        assert Rule(">=3.0").matches("selenium-server-standalone-3.141.59.jar")

    def test_contains_non_version_object(self):
        """'in' operator should return False for non-Version objects."""
        rule = Rule(">=1.0.0")
        assert ("1.2.3" in rule) is False
        assert (123 in rule) is False
        assert (None in rule) is False

    @pytest.mark.parametrize("invalid_rule_str", [
        "",
        "   ",
        "[1.0.0]",
        "==1.0.0",
        "!=1.0.0",
        "<>1.0.0",
        "[1.0, 2.0, 3.0]",
        ">= 1.0.0, < 2.0.0",
        "[2.0, 1.0]",
        ">=1",
        "garbage",
        "*",
        "a.*",
    ])
    def test_invalid_rule_string_parsing(self, invalid_rule_str):
        """Invalid rule strings raise RuleError."""
        with pytest.raises(RuleError):
            Rule(invalid_rule_str)

    def test_str_and_repr(self):
        rule = Rule("  >=1.2 ")
        assert str(rule) == ">=1.2"
        assert repr(rule) == "Rule('>=1.2')"

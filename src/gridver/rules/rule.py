import re
from typing import Union

from .version import Version, Ordering, compare, parse
from ..exceptions import ParseError, RuleError

class Rule:
    """
        Class Rule used to describe a rule about versions
    """

    def __init__(self, rule_str: str):
        """
        - range: [1.0, 2.0], (1.0, 2.0), [1.0, 2.0), (1.0, 2.0]
        - compare: >=1.2.3, <2.0.0
        - prefix: 114.*, 10.0.17*
        - equal: 1.5.0
        """
        if not isinstance(rule_str, str) or not rule_str.strip():
            raise RuleError(f"Empty version rule '{rule_str}'")
        self.rule_str = rule_str.strip()
        try:
            self.check = self._parse_rule()
        except ParseError as e:
            raise RuleError(f"Invalid version rule '{self.rule_str}': {e}") from e

    def _parse_rule(self):
        """
            parse a rule
        """
        match = re.match(r"^(\[|\()\s*([^,]+?)\s*,\s*([^,]+?)\s*(\]|\))$", self.rule_str)

        if match:
            start_bracket, start_ver_str, end_ver_str, end_bracket = match.groups()

            start_ver = parse(start_ver_str)
            end_ver = parse(end_ver_str)
            if compare(start_ver, end_ver) is Ordering.GREATER:
                raise RuleError(f"Empty version range '{self.rule_str}'")

            checks = []
            if start_bracket == '[':
                checks.append(lambda v: start_ver <= v)
            else: # '('
                checks.append(lambda v: start_ver < v)

            if end_bracket == ']':
                checks.append(lambda v: v <= end_ver)
            else: # ')'
                checks.append(lambda v: v < end_ver)

            return lambda v: checks[0](v) and checks[1](v)

        if re.match(r"^[\[\(]", self.rule_str) or re.search(r"[\]\),]", self.rule_str):
            raise RuleError(f"Malformed version range '{self.rule_str}'")

        # `edgeHtmlVersion`-style prefix match, e.g. `17.*` or `10.0.17*`
        if self.rule_str.endswith('*'):
            prefix = self.rule_str.rstrip('*').rstrip('.')
            if not re.fullmatch(r"\d+(?:\.\d+)*", prefix):
                raise RuleError(f"Invalid prefix rule '{self.rule_str}'")
            dotted = self.rule_str.rstrip('*').endswith('.')
            return lambda v: self._prefix_check(v, prefix, dotted)

        op_map = {
            '>=': lambda v, t: v >= t,
            '<=': lambda v, t: v <= t,
            '>': lambda v, t: v > t,
            '<': lambda v, t: v < t,
        }
        for op, func in op_map.items():
            if self.rule_str.startswith(op):
                version_part = self.rule_str[len(op):].strip()
                if not re.match(r"^v?\d", version_part):
                    raise RuleError(f"Unsupported version rule '{self.rule_str}'")
                target_version = parse(version_part)
                return lambda v: func(v, target_version)

        if not re.match(r"^v?\d", self.rule_str):
            raise RuleError(f"Unsupported version rule '{self.rule_str}'")
        target_version = parse(self.rule_str)
        return lambda v: v == target_version

    @staticmethod
    def _prefix_check(version: Version, prefix: str, dotted: bool) -> bool:
        numeric = ".".join(str(x) for x in version.fields)
        if dotted:
            return numeric == prefix or numeric.startswith(prefix + ".")
        return numeric.startswith(prefix)

    def matches(self, version: Union[Version, str]) -> bool:
        """
            Like `in`, but accepts raw strings
        """
        if isinstance(version, str):
            version = parse(version)
        return version in self

    def __contains__(self, version: Version) -> bool:
        """
            `version in rule`
        """
        if not isinstance(version, Version):
            return False
        return self.check(version)

    def __str__(self):
        return f"{self.rule_str}"

    def __repr__(self):
        return f"Rule('{self.rule_str}')"

"""Declarative rewrite rules for version-bearing README tokens.

Each rule replaces every match of ``pattern`` with ``template`` formatted
with the new version. Adding a release artifact means adding a rule here.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteRule:
    """One version substitution."""

    name: str
    pattern: re.Pattern[str]
    template: str

    def apply(self, text: str, version: str) -> str:
        """Return ``text`` with every match rewritten to ``version``."""
        replacement = self.template.format(version=version)
        return self.pattern.sub(lambda _: replacement, text)


def artifact_rule(name: str, suffix: str) -> RewriteRule:
    """Build the rule for ``cc-switch-cli-v<version><suffix>``."""
    return RewriteRule(
        name=name,
        pattern=re.compile(rf"cc-switch-cli-v[0-9.]*{re.escape(suffix)}"),
        template="cc-switch-cli-v{version}" + suffix,
    )


DEFAULT_RULES: tuple[RewriteRule, ...] = (
    RewriteRule(
        name="badge",
        pattern=re.compile(r"version-[0-9.]*-blue\.svg"),
        template="version-{version}-blue.svg",
    ),
    artifact_rule("macos", "-darwin-universal.tar.gz"),
    artifact_rule("linux-x64", "-linux-x64-musl.tar.gz"),
    artifact_rule("linux-arm64", "-linux-arm64-musl.tar.gz"),
    artifact_rule("windows", "-windows-x64.zip"),
)


def apply_rules(
    text: str, version: str, rules: tuple[RewriteRule, ...] = DEFAULT_RULES
) -> str:
    """Apply ``rules`` in order."""
    for rule in rules:
        text = rule.apply(text, version)
    return text

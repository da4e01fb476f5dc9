"""
Adapters - Concrete extraction programs.

Implementations of the Rule and Init capabilities live here so the
analysis domain stays independent of any selector language.
"""

from .regex import RegexInit, RegexRule, regex_init_factory, regex_rule_factory

__all__ = [
    "RegexRule",
    "RegexInit",
    "regex_rule_factory",
    "regex_init_factory",
]

"""
Regex Adapter - Regular-expression Rule and Init programs.
"""

from .programs import RegexInit, RegexRule, regex_init_factory, regex_rule_factory

__all__ = ["RegexRule", "RegexInit", "regex_rule_factory", "regex_init_factory"]

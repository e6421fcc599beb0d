"""Bundled rule table data."""

from .reference_loader import RuleDataLoader, load_rule_table, rule_data

__all__ = ['RuleDataLoader', 'load_rule_table', 'rule_data']

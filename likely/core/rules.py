"""Rule and rule table types for the rewrite engine.

A rule table is configuration: an ordered list of pattern -> outputs rules,
earlier rules winning over later ones. Tables are immutable once built.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..config import ConfigurationError

RECORD_KEYS = frozenset({'pattern', 'outputs', 'at_start', 'at_end'})


@dataclass(frozen=True)
class Rule:
    """
    One rewrite rule.

    Attributes:
        pattern: Non-empty sequence matched case-exactly
        outputs: Replacement alternatives; "" deletes the pattern
        at_start: True = only at word start, False = never at word start,
            None = anywhere
        at_end: Same as at_start, checked against the end of the pattern
    """
    pattern: str
    outputs: Tuple[str, ...]
    at_start: Optional[bool] = None
    at_end: Optional[bool] = None

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ConfigurationError(f"Rule pattern must be a non-empty string: {self.pattern!r}")

        outputs = self.outputs
        if isinstance(outputs, str):
            outputs = (outputs,)
        elif isinstance(outputs, (list, tuple)):
            outputs = tuple(outputs)
        else:
            raise ConfigurationError(
                f"Rule {self.pattern!r}: outputs must be a string or list of strings, got {outputs!r}"
            )
        if not outputs:
            raise ConfigurationError(f"Rule {self.pattern!r} has no outputs")
        if any(not isinstance(o, str) for o in outputs):
            raise ConfigurationError(f"Rule {self.pattern!r} has non-string outputs: {outputs!r}")
        object.__setattr__(self, 'outputs', outputs)

        for name in ('at_start', 'at_end'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise ConfigurationError(
                    f"Rule {self.pattern!r}: {name} must be true, false or absent, got {value!r}"
                )

    @property
    def branching(self) -> int:
        """Number of output alternatives."""
        return len(self.outputs)

    def matches_at(self, word: str, i: int) -> bool:
        """True if the rule applies to word at position i."""
        end = i + len(self.pattern)
        if self.at_start is not None and self.at_start != (i == 0):
            return False
        if self.at_end is not None and self.at_end != (end == len(word)):
            return False
        return word.startswith(self.pattern, i)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'Rule':
        """Build a rule from a {pattern, outputs, at_start?, at_end?} mapping."""
        unknown = set(record) - RECORD_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown rule keys {sorted(unknown)} in {dict(record)!r}")
        if 'pattern' not in record or 'outputs' not in record:
            raise ConfigurationError(f"Rule needs 'pattern' and 'outputs': {dict(record)!r}")

        return cls(
            pattern=record['pattern'],
            outputs=record['outputs'],
            at_start=record.get('at_start'),
            at_end=record.get('at_end'),
        )

    def to_record(self) -> Dict[str, Any]:
        """Inverse of from_record."""
        record: Dict[str, Any] = {'pattern': self.pattern, 'outputs': list(self.outputs)}
        if self.at_start is not None:
            record['at_start'] = self.at_start
        if self.at_end is not None:
            record['at_end'] = self.at_end
        return record


RuleLike = Union[Rule, Mapping[str, Any]]


@dataclass(frozen=True)
class RuleTable:
    """Ordered rules; the first matching rule at a position wins."""
    rules: Tuple[Rule, ...] = field(default_factory=tuple)
    name: str = ''

    def __post_init__(self):
        rules = tuple(self.rules)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise ConfigurationError(f"Not a Rule: {rule!r}")
        object.__setattr__(self, 'rules', rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def max_branching(self) -> int:
        """Largest number of alternatives of any rule (1 for an empty table)."""
        return max((rule.branching for rule in self.rules), default=1)

    @classmethod
    def from_records(cls, records: Iterable[RuleLike], name: str = '') -> 'RuleTable':
        """Build a table from rules or record mappings, keeping their order."""
        rules: List[Rule] = []
        for position, record in enumerate(records):
            if isinstance(record, Rule):
                rules.append(record)
            elif isinstance(record, Mapping):
                try:
                    rules.append(Rule.from_record(record))
                except ConfigurationError as e:
                    label = f" in table {name!r}" if name else ''
                    raise ConfigurationError(f"Rule #{position}{label}: {e}") from e
            else:
                raise ConfigurationError(f"Rule #{position} is neither a Rule nor a mapping: {record!r}")
        return cls(tuple(rules), name)

    @classmethod
    def coerce(cls, table: Union['RuleTable', Iterable[RuleLike], None]) -> 'RuleTable':
        """Accept a RuleTable, a plain list of rules/records, or None (empty)."""
        if table is None:
            return cls()
        if isinstance(table, RuleTable):
            return table
        return cls.from_records(table)

    def to_records(self) -> List[Dict[str, Any]]:
        """Serialize the table to plain records."""
        return [rule.to_record() for rule in self.rules]

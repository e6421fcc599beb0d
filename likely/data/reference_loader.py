"""
Rule table loader for the bundled phonetic rule tables.

This module loads ordered rewrite rule tables stored as JSON. The English and
Swedish tables ship with the package; callers can load their own tables for
other language configurations with load_rule_table.

File layout:
    {"name": "swedish", "rules": [{"pattern": "SJ", "outputs": ["X"]}, ...]}
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..config import ConfigurationError
from ..core.rules import RuleTable

logger = logging.getLogger(__name__)

BUNDLED_TABLES = {
    'english': 'english_rules.json',
    'swedish': 'swedish_rules.json',
}


def load_rule_table(path: Union[str, Path], name: Optional[str] = None) -> RuleTable:
    """
    Load a rule table from a JSON file.

    Args:
        path: Path to the JSON file
        name: Table name, defaults to the file's "name" or its stem

    Returns:
        RuleTable in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not a valid rule table
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Invalid JSON in rule table {path}: {e}") from e

    if isinstance(data, list):
        records = data
        file_name = None
    elif isinstance(data, dict) and isinstance(data.get('rules'), list):
        records = data['rules']
        file_name = data.get('name')
    else:
        raise ConfigurationError(f"Rule table {path} must be a list of rules or have a 'rules' list")

    table = RuleTable.from_records(records, name=name or file_name or path.stem)
    logger.info(f"Loaded rule table {table.name!r} with {len(table)} rules from {path}")
    return table


class RuleDataLoader:
    """Loads and caches the rule tables bundled with the package."""

    _instance = None
    _initialized = False

    def __new__(cls):
        """Singleton pattern to ensure each table is parsed once."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the rule data loader."""
        if not RuleDataLoader._initialized:
            self.data_dir = Path(__file__).parent
            self._tables: Dict[str, RuleTable] = {}
            RuleDataLoader._initialized = True

    def available_tables(self) -> List[str]:
        """Names of the bundled rule tables."""
        return sorted(BUNDLED_TABLES)

    def get_table(self, name: str) -> RuleTable:
        """
        Get a bundled rule table by name.

        Args:
            name: Table name (e.g., "english", "swedish"), case-insensitive

        Returns:
            The parsed RuleTable

        Raises:
            ConfigurationError: If no bundled table has that name
        """
        key = name.lower().strip()
        if key not in BUNDLED_TABLES:
            raise ConfigurationError(
                f"Unknown rule table {name!r}, available: {', '.join(self.available_tables())}"
            )

        if key not in self._tables:
            self._tables[key] = load_rule_table(self.data_dir / BUNDLED_TABLES[key], name=key)
        return self._tables[key]

    def get_tables(self, names: List[str]) -> List[RuleTable]:
        """Get several bundled tables, in the given order."""
        return [self.get_table(name) for name in names]


# Create a singleton instance for easy import
rule_data = RuleDataLoader()

"""Tests for the bundled rule table loader."""

import json

import pytest
from likely.config import ConfigurationError
from likely.core.rules import Rule
from likely.data.reference_loader import RuleDataLoader, load_rule_table, rule_data


class TestRuleDataLoader:
    """Test the rule data loader singleton."""

    def test_singleton_pattern(self):
        """Test that RuleDataLoader is a singleton."""
        loader1 = RuleDataLoader()
        loader2 = RuleDataLoader()
        assert loader1 is loader2
        assert loader1 is rule_data

    def test_available_tables(self):
        """Test the names of the bundled tables."""
        assert rule_data.available_tables() == ['english', 'swedish']

    def test_english_table(self):
        """Test the size and ends of the English table."""
        table = rule_data.get_table('english')
        assert table.name == 'english'
        assert len(table) == 110
        assert table.rules[0] == Rule('TCH', 'C')
        assert table.rules[-1] == Rule('R', '', at_end=True)

    def test_swedish_table(self):
        """Test the size and ends of the Swedish table."""
        table = rule_data.get_table('swedish')
        assert table.name == 'swedish'
        assert len(table) == 79
        assert table.rules[0].pattern == 'GARAGE'
        assert table.rules[-1] == Rule('H', [''])

    def test_tables_cached(self):
        """Test that a table is parsed once, names are case-insensitive."""
        assert rule_data.get_table('swedish') is rule_data.get_table('Swedish')

    def test_get_tables_keeps_order(self):
        """Test that get_tables keeps the requested order."""
        tables = rule_data.get_tables(['swedish', 'english'])
        assert [t.name for t in tables] == ['swedish', 'english']

    def test_unknown_table(self):
        """Test that an unknown name lists the available tables."""
        with pytest.raises(ConfigurationError, match="available"):
            rule_data.get_table('finnish')

    def test_bundled_tables_use_protected_letters(self):
        """Test that Scandinavian letters appear in the tables as themselves."""
        swedish = rule_data.get_table('swedish')
        patterns = {r.pattern for r in swedish}
        assert 'Æ' in patterns
        assert 'Ø' in patterns
        assert 'SKÄ' in patterns


class TestLoadRuleTable:
    """Test loading caller-supplied rule files."""

    def test_load_object_layout(self, tmp_path):
        """Test a file with a name and a rules list."""
        path = tmp_path / 'norwegian.json'
        path.write_text(json.dumps({
            'name': 'norsk',
            'rules': [{'pattern': 'KJ', 'outputs': ['C'], 'at_start': True}],
        }), encoding='utf-8')
        table = load_rule_table(path)
        assert table.name == 'norsk'
        assert table.rules == (Rule('KJ', ('C',), at_start=True),)

    def test_load_list_layout(self, tmp_path):
        """Test a file holding a bare list of rules."""
        path = tmp_path / 'mini.json'
        path.write_text(json.dumps([{'pattern': 'PH', 'outputs': 'F'}]), encoding='utf-8')
        table = load_rule_table(str(path))
        assert table.name == 'mini'
        assert len(table) == 1

    def test_explicit_name(self, tmp_path):
        """Test that an explicit name wins over the file stem."""
        path = tmp_path / 'mini.json'
        path.write_text('[]', encoding='utf-8')
        assert load_rule_table(path, name='custom').name == 'custom'

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_rule_table(tmp_path / 'nope.json')

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is a configuration error."""
        path = tmp_path / 'broken.json'
        path.write_text('{"rules": [', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            load_rule_table(path)

    def test_wrong_shape(self, tmp_path):
        """Test that a file without a rules list is rejected."""
        path = tmp_path / 'shape.json'
        path.write_text('{"patterns": []}', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            load_rule_table(path)

    def test_invalid_rule(self, tmp_path):
        """Test that an invalid rule in a file is rejected."""
        path = tmp_path / 'bad.json'
        path.write_text('[{"pattern": "", "outputs": "X"}]', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            load_rule_table(path)

    def test_null_outputs(self, tmp_path):
        """Test that a rule with null outputs is a configuration error."""
        path = tmp_path / 'null.json'
        path.write_text('[{"pattern": "A", "outputs": null}]', encoding='utf-8')
        with pytest.raises(ConfigurationError, match="#0"):
            load_rule_table(path)

    def test_numeric_outputs(self, tmp_path):
        """Test that a rule with numeric outputs is a configuration error."""
        path = tmp_path / 'number.json'
        path.write_text('[{"pattern": "A", "outputs": 5}]', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            load_rule_table(path)

    def test_not_utf8(self, tmp_path):
        """Test that a Latin-1 encoded file is a configuration error."""
        path = tmp_path / 'latin1.json'
        path.write_bytes('[{"pattern": "Å", "outputs": "O"}]'.encode('latin-1'))
        with pytest.raises(ConfigurationError, match="latin1.json"):
            load_rule_table(path)

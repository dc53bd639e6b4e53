"""Tests for YAML run configurations."""

import pytest
from pyatomword.core.exceptions import ConfigurationError
from pyatomword.parsing.config.config_parser import RunConfigParser


class TestRunConfigParser:
    """Test parsing and validation of run configurations."""

    def test_minimal_config(self, write_config):
        """Test a configuration with only words."""
        path = write_config("words: [bacon, poison]\n")
        parser = RunConfigParser(path)
        assert parser.words == ["bacon", "poison"]
        assert parser.data_file is None
        assert parser.output_file is None
        assert parser.lowercase is False

    def test_relative_paths_resolved(self, write_config, tmp_path):
        """Test that relative paths are resolved against the configuration directory."""
        path = write_config("""
data_file: data/elements.csv
output_file: out/report.csv
words:
  - bacon
""")
        parser = RunConfigParser(path)
        assert parser.data_file == tmp_path / "data" / "elements.csv"
        assert parser.output_file == tmp_path / "out" / "report.csv"

    def test_absolute_path_kept(self, write_config, tmp_path):
        """Test that absolute paths are used as given."""
        data_file = tmp_path / "elsewhere.csv"
        path = write_config(f"data_file: {data_file}\nwords: [bacon]\n")
        assert RunConfigParser(path).data_file == data_file

    def test_lowercase_option(self, write_config):
        """Test that words are lowercased on request."""
        path = write_config("lowercase: true\nwords: [Bacon, POISON]\n")
        assert RunConfigParser(path).words == ["bacon", "poison"]

    def test_missing_file(self, tmp_path):
        """Test error handling for missing files."""
        with pytest.raises(FileNotFoundError):
            RunConfigParser(tmp_path / "nonexistent.yaml")

    def test_unknown_key_suggestion(self, write_config):
        """Test that misspelled keys are reported with a suggestion."""
        path = write_config("word: [bacon]\n")
        with pytest.raises(ConfigurationError, match="did you mean 'words'"):
            RunConfigParser(path)

    def test_missing_words(self, write_config):
        """Test that words are required."""
        path = write_config("lowercase: true\n")
        with pytest.raises(ConfigurationError, match="Missing required field"):
            RunConfigParser(path)

    @pytest.mark.parametrize("content", ["words: []\n", "words: bacon\n"])
    def test_words_must_be_non_empty_list(self, write_config, content):
        """Test invalid word lists."""
        with pytest.raises(ConfigurationError, match="non-empty list"):
            RunConfigParser(write_config(content))

    def test_words_must_be_strings(self, write_config):
        """Test that non-string words are rejected."""
        with pytest.raises(ConfigurationError, match="strings"):
            RunConfigParser(write_config("words: [bacon, 42]\n"))

    def test_lowercase_must_be_bool(self, write_config):
        """Test that the lowercase flag must be a boolean."""
        with pytest.raises(ConfigurationError, match="true or false"):
            RunConfigParser(write_config("lowercase: sometimes\nwords: [bacon]\n"))

    def test_unsupported_output_type(self, write_config):
        """Test that only csv and xlsx reports are accepted."""
        with pytest.raises(ConfigurationError, match="Unsupported output file type"):
            RunConfigParser(write_config("output_file: report.json\nwords: [bacon]\n"))

    @pytest.mark.parametrize("key,value", [
        ("output_file", "5"),
        ("data_file", "5"),
        ("data_file", "[elements.csv]"),
        ("output_file", "null"),
    ])
    def test_paths_must_be_strings(self, write_config, key, value):
        """Test that file entries must be path strings."""
        with pytest.raises(ConfigurationError, match=f"'{key}' must be a path string"):
            RunConfigParser(write_config(f"{key}: {value}\nwords: [bacon]\n"))

    def test_duplicate_keys(self, write_config):
        """Test that duplicate keys are rejected."""
        with pytest.raises(ConfigurationError, match="Duplicate key"):
            RunConfigParser(write_config("words: [bacon]\nwords: [poison]\n"))

    def test_invalid_yaml(self, write_config):
        """Test error handling for invalid YAML."""
        with pytest.raises(ConfigurationError):
            RunConfigParser(write_config("words: [bacon\n"))

    def test_empty_file(self, write_config):
        """Test that an empty configuration is rejected."""
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            RunConfigParser(write_config(""))

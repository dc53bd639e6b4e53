import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ruamel.yaml import YAML, constructor, scanner

from pyatomword.core.exceptions import ConfigurationError
from pyatomword.data.constants import FileConstants
from pyatomword.parsing.config.yaml_keys import DATA_FILE_KEY, WORDS_KEY, LOWERCASE_KEY, OUTPUT_FILE_KEY, \
    VALID_CONFIG_KEYS

logger = logging.getLogger(__name__)


class RunConfigParser:
    """
    Parser for run configuration files.

    A run configuration names the words to decompose and, optionally, the
    element data file and a report file. Relative paths are resolved against
    the directory of the configuration file.
    """

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        self._validate_config()
        logger.info("Loaded run configuration from %s with %d words", self.config_path, len(self.words))

    # --- Public API ---
    @property
    def words(self) -> List[str]:
        words = [str(word) for word in self.config[WORDS_KEY]]
        if self.lowercase:
            words = [word.lower() for word in words]
        return words

    @property
    def lowercase(self) -> bool:
        return bool(self.config.get(LOWERCASE_KEY, False))

    @property
    def data_file(self) -> Optional[Path]:
        return self._resolve_path(self.config.get(DATA_FILE_KEY))

    @property
    def output_file(self) -> Optional[Path]:
        return self._resolve_path(self.config.get(OUTPUT_FILE_KEY))

    # --- Loading ---
    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        logger.debug("Loading run configuration: %s", self.config_path)
        try:
            with open(self.config_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                return yaml.load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Run configuration not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            raise ConfigurationError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            raise ConfigurationError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            raise ConfigurationError(f"Error parsing {self.config_path}: {str(e)}") from e

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the top-level structure of the configuration."""
        logger.debug("Validating run configuration: %s", self.config_path)
        if not isinstance(self.config, dict):
            raise ConfigurationError(f"Configuration in {self.config_path} must be a mapping, "
                                     f"got {type(self.config).__name__}")
        unknown_keys = set(self.config.keys()) - VALID_CONFIG_KEYS
        if unknown_keys:
            suggestions = {
                key: get_close_matches(key, VALID_CONFIG_KEYS, n=1, cutoff=0.6)
                for key in unknown_keys
            }
            error_msg = "Unknown keys found in configuration: \n ->"
            for key, matches in suggestions.items():
                suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
                error_msg += f" - '{key}'{suggestion}\n"
            raise ConfigurationError(error_msg)
        if WORDS_KEY not in self.config:
            raise ConfigurationError(f"Missing required field '{WORDS_KEY}' in {self.config_path}")
        words = self.config[WORDS_KEY]
        if not isinstance(words, list) or not words:
            raise ConfigurationError(f"'{WORDS_KEY}' must be a non-empty list, got {words!r}")
        non_strings = [word for word in words if not isinstance(word, str)]
        if non_strings:
            raise ConfigurationError(f"All entries of '{WORDS_KEY}' must be strings, got {non_strings!r}")
        if LOWERCASE_KEY in self.config and not isinstance(self.config[LOWERCASE_KEY], bool):
            raise ConfigurationError(f"'{LOWERCASE_KEY}' must be true or false, "
                                     f"got {self.config[LOWERCASE_KEY]!r}")
        for key in (DATA_FILE_KEY, OUTPUT_FILE_KEY):
            if key in self.config and not isinstance(self.config[key], str):
                raise ConfigurationError(f"'{key}' must be a path string, got {self.config[key]!r}")
        output_file = self.output_file
        if output_file is not None and output_file.suffix.lower() not in FileConstants.SUPPORTED_EXPORT_EXTENSIONS:
            raise ConfigurationError(f"Unsupported output file type: '{output_file.suffix}'. "
                                     f"Supported types are: {FileConstants.SUPPORTED_EXPORT_EXTENSIONS}")
        logger.debug("Run configuration validation completed")

    def _resolve_path(self, value: Optional[str]) -> Optional[Path]:
        if value is None:
            return None
        path = Path(value)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

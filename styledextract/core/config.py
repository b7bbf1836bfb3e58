"""
Configuration management for styledextract.
"""
import copy
from typing import Any

from styledextract.core.error_handling import InvalidConfigurationError

_DEFAULTS = {
    'styling': {
        'package': 'styled-components',
        'default_identifier': 'styled',
        'name_prefix': 'Styled',
        'placeholder': '// TODO: add styling',
    },
    'formatting': {
        'indent_size': 2,
    },
    'logging': {
        'level': 'WARNING',
    },
}


class Configuration:
    """Configuration manager for styledextract."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the configuration with defaults."""
        self._config = copy.deepcopy(_DEFAULTS)

    def reset(self):
        self._initialize()

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value."""
        self._validate(section, key, value)
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value

    @staticmethod
    def _validate(section: str, key: str, value: Any):
        setting = f'{section}.{key}'
        if setting == 'formatting.indent_size':
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidConfigurationError(setting, value, 'must be a non-negative integer')
        elif section == 'styling':
            if not isinstance(value, str):
                raise InvalidConfigurationError(setting, value, 'must be a string')
            if key in ('package', 'default_identifier') and not value.strip():
                raise InvalidConfigurationError(setting, value, 'must not be blank')

    @property
    def indent(self) -> str:
        """Indentation unit used inside synthesized template literals."""
        return ' ' * self.get('formatting', 'indent_size', 2)

# Initialize configuration
config = Configuration()

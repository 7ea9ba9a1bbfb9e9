"""
Key format options shared by flatten and unflatten.

Key anatomy with the ``braces`` preset and start ``$``::

    .-------------> start
    |.------------> prefix
    ||       .----> suffix, on leaves only if suffix_end
    ||       |.---> prefix_list
    ||       || .-> suffix_list, on leaves only if suffix_list_end
    ||       || |
    ${assokey}[0] => 'Foo'
"""
from dataclasses import dataclass, asdict, fields
from typing import Optional, Union

from pydash import defaults, omit_by

from flatkeys.errors import ConfigurationError

DEFAULTS = {
    'prefix': '',
    'suffix': '.',
    'suffix_end': False,
    'prefix_list': '[',
    'suffix_list': ']',
    'suffix_list_end': True,
}

PRESETS = {
    'default': {},
    # {assokey}[0]
    'braces': {
        'prefix': '{',
        'suffix': '}',
        'suffix_end': True,
        'prefix_list': '[',
        'suffix_list': ']',
        'suffix_list_end': True,
    },
    # assokey->0
    'arrow': {
        'prefix': '',
        'suffix': '->',
        'suffix_end': False,
        'prefix_list': '',
        'suffix_list': '',
    },
    # assokey/0/
    'path': {
        'prefix': '',
        'suffix': '/',
        'suffix_end': True,
        'prefix_list': '',
        'suffix_list': '',
    },
}

_FLAGS = ('suffix_end', 'suffix_list_end')


@dataclass
class KeyFormat:
    """
    Key format configuration.
    Fields left as None are filled from DEFAULTS, explicit values are kept.
    """
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    suffix_end: Optional[bool] = None
    prefix_list: Optional[str] = None
    suffix_list: Optional[str] = None
    suffix_list_end: Optional[bool] = None

    def __post_init__(self):
        merged = defaults(omit_by(asdict(self), lambda value: value is None), DEFAULTS)
        for name, value in merged.items():
            expected = bool if name in _FLAGS else str
            ConfigurationError.invariant(
                isinstance(value, expected),
                f'Invalid {name} option: {value!r}, expected {expected.__name__}')
            setattr(self, name, value)

    @classmethod
    def from_dict(cls, options: dict) -> 'KeyFormat':
        """
        Create KeyFormat from option dictionary.
        Accepts both "suffix-end" and "suffix_end" style names.
        """
        known = {field.name for field in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = str(key).replace('-', '_')
            ConfigurationError.invariant(name in known, f'Unknown option: {key}')
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def preset(cls, name: str) -> 'KeyFormat':
        """ Get named key format """
        ConfigurationError.invariant(
            name in PRESETS, f'Unknown preset: {name}, available: {", ".join(PRESETS)}')
        return cls(**PRESETS[name])

    @classmethod
    def coerce(cls, options: Union[None, dict, 'KeyFormat']) -> 'KeyFormat':
        """ Turn None, dict or KeyFormat into KeyFormat """
        if options is None:
            return cls()
        if isinstance(options, KeyFormat):
            return options
        if isinstance(options, dict):
            return cls.from_dict(options)
        raise ConfigurationError(f'options should be dict or KeyFormat, not {type(options)}')

    def to_dict(self) -> dict:
        """ Options as dictionary using hyphenated names """
        return {name.replace('_', '-'): value for name, value in asdict(self).items()}

    @property
    def list_delimited(self) -> bool:
        """ True when lists are rendered with their own delimiters """
        return bool(self.prefix_list or self.suffix_list)

    @property
    def delimiters(self) -> tuple:
        """ Delimiters in splitter priority order """
        return self.suffix, self.prefix, self.prefix_list, self.suffix_list

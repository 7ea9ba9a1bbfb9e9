""" flatkeys library """
from flatkeys.errors import (FlatkeysError, ConfigurationError, ConfigurationAmbiguity,
                             UnresolvableKey, StructuralConflict, SourceError)
from flatkeys.options import KeyFormat, DEFAULTS, PRESETS
from flatkeys.flatten import flatten, flatten_list, is_list
from flatkeys.unflatten import unflatten, split_key, splitter

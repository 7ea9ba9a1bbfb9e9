""" flatkeys exceptions """


class FlatkeysError(Exception):
    """ Base class for all flatkeys errors """

    @classmethod
    def invariant(cls, true, message):
        """ Raise this error with given message if not true """
        if not true:
            raise cls(message)


class ConfigurationError(FlatkeysError, ValueError):
    """ Raised when key format options are invalid """


class ConfigurationAmbiguity(ConfigurationError):
    """ Raised when no delimiter is configured to split flat keys with """


class UnresolvableKey(FlatkeysError, ValueError):
    """ Raised when flat key does not resolve to any path segment """


class StructuralConflict(FlatkeysError, ValueError):
    """ Raised in strict mode when flat keys disagree about a container """


class SourceError(FlatkeysError):
    """ Raised when input document cannot be read """

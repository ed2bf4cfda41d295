"""Exceptions raised by the analyzer."""


class VoynichError(Exception):
    """Base class for every analyzer error."""


class MissingWordList(VoynichError):
    """A configured word list does not exist."""

    def __init__(self, path):
        super().__init__(f"Dictionary not found: {path}")
        self.path = path


class WordListReadFailure(VoynichError):
    """A word list exists but could not be read."""

    def __init__(self, path, reason):
        super().__init__(f"Error reading dictionary {path}: {reason}")
        self.path = path


class InvalidKey(VoynichError, ValueError):
    """A cipher key cannot be used (e.g. a keyword without letters)."""


class ConfigError(VoynichError):
    """The configuration file or overrides are malformed."""

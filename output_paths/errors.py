"""Exceptions raised while resolving output file locations."""


class OutputPathError(ValueError):
    """Base class for every output path resolution failure."""


class ConfigurationError(OutputPathError):
    """The input path or the configuration cannot be used at all."""


class InvalidOutputPathError(OutputPathError):
    """The output path cannot receive the requested outputs."""


class InvalidArgumentError(OutputPathError):
    """A path argument is empty or outside the expected input tree."""

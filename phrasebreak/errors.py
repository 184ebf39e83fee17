"""Exception hierarchy shared by the phrase-break engine and its loaders."""


class PhraseBreakError(Exception):
    """Base class for every error raised by phrasebreak."""


class ConfigError(PhraseBreakError, ValueError):
    """The YAML configuration could not be parsed or has the wrong shape."""


class ModelLoadError(PhraseBreakError):
    """
    The model resource is missing, truncated, or internally inconsistent.

    This is a fatal construction error: an engine that hit it never scans.
    """


class EngineUnusableError(PhraseBreakError):
    """An evaluation call was made on an engine whose model failed to load."""


class InputError(PhraseBreakError, ValueError):
    """A single evaluation call received malformed text, a bad range or a bad index map."""

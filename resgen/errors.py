"""Errors raised by the resource generator.

Every stage raises one of these and stops; nothing is retried. The CLI
catches ``ResGenError`` and turns it into a non-zero exit status.
"""


class ResGenError(Exception):
    """Base class for all generator failures"""


class ImageLoadError(ResGenError):
    def __init__(self, kind, path):
        self.kind = kind
        self.path = path
        super().__init__(f"Could not load {kind} file: {path}")


class DimensionMismatch(ResGenError):
    def __init__(self, kind, expected, actual):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        width, height = actual
        super().__init__(
            f"Bad {kind} file: expected {expected}x{expected}, got {width}x{height}"
        )


class OutputDirNotFound(ResGenError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Output directory not found: {path}")


class UnknownPlatforms(ResGenError):
    def __init__(self, tokens):
        self.tokens = list(tokens)
        super().__init__(f"Bad platforms: {', '.join(self.tokens)}")


class WriteError(ResGenError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Could not write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RegistryError(ResGenError):
    """Malformed platform definition data"""

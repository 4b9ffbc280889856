from __future__ import annotations


class BuildError(SystemExit):
    """Fatal build error. Exits with status 1 and prints the message to stderr."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(BuildError):
    pass


class ManifestError(BuildError):
    pass


class NoFilesError(BuildError):
    pass


class PackToolFailure(BuildError):
    pass

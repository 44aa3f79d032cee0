"""Errors raised to the host by the extension hooks."""


class ExtensionError(Exception):
    """Base class for failures reported to the mod manager."""


class GameNotFoundError(ExtensionError):
    """The game installation could not be resolved."""


class DependencyInstallError(ExtensionError):
    """A bundled dependency could not be copied into the game folder."""

    def __init__(self, dependency: str, message: str = None):
        self.dependency = dependency
        super().__init__(message or f"Failed to copy dependency: {dependency}")


class NoInstallableContentError(ExtensionError):
    """No archive entry matched the content predicate."""

"""Custom exceptions for the PHP namespace resolver."""


class NsResolverError(Exception):
    """Base exception for all resolver errors.

    Every subclass carries a default user-facing message so commands can
    report it without extra formatting.
    """

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ConfigError(NsResolverError):
    """Configuration-related errors."""

    default_message = "Invalid configuration."


class NoSelectionError(NsResolverError):
    """No resolvable identifier under the cursor or selection."""

    default_message = "No class is selected."


class ClassNotFoundError(NsResolverError):
    """No candidate file or namespace was found for a class name."""

    default_message = "The class is not found."


class AlreadyImportedError(NsResolverError):
    """The target use statement is already present."""

    default_message = "The class is already imported."


class NothingToSortError(NsResolverError):
    """Fewer than two use statements exist."""

    default_message = "Nothing to sort."


class AliasConflictError(NsResolverError):
    """The chosen alias collides with an existing use statement."""

    default_message = "This alias is already in use."


class NoWorkspaceFolderError(NsResolverError):
    """No workspace root is available for manifest lookup."""

    default_message = "No folder opened in workspace, cannot find composer.json."


class ManifestNotFoundError(NsResolverError):
    """No composer.json between the file and the workspace root."""

    default_message = "No composer.json file found, automatic namespace generation failed."


class NoAutoloadConfigError(NsResolverError):
    """The manifest has no autoload section."""

    default_message = "No autoload key in composer.json, automatic namespace generation failed."


class NoPsr4EntryError(NsResolverError):
    """The manifest has no usable psr-4 entry."""

    default_message = (
        "No psr-4 key in composer.json autoload object, automatic namespace generation failed."
    )


class PromptCancelled(Exception):
    """Raised when an interactive prompt is dismissed without a value.

    Not an error: commands abort silently when they see it.
    """

"""Generator exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Every failure is fatal for the generation run: the inputs are
static, so retrying without changing them cannot change the outcome.

Hierarchy:
    LocaleGenError (base)
    ├─ MissingDefaultLocaleError (no or empty default catalog)
    ├─ UnresolvedCatalogError (locale without catalog)
    ├─ SchemaConflictError (key paths that cannot form a schema)
    │  └─ IdentifierCollisionError (naming not injective within a scope)
    ├─ InstanceMismatchError (instance entries do not match the schema)
    ├─ CatalogFormatError (unreadable or malformed catalog input)
    │  └─ DuplicateKeyPathError (key path repeated in one catalog)
    ├─ ConfigurationError (invalid or missing configuration)
    └─ GenerationStageError (collaborator failure wrapped with stage name)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocaleGenError(Exception):
    """Base exception for all generator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleGenError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def format_error(self) -> str:
        """Return the Rust-style rendering of the diagnostic, or the plain message.

        A plain message is followed by any notes added with ``add_note``.
        """
        if self.diagnostic is not None:
            return self.diagnostic.format_error()
        notes = getattr(self, "__notes__", ())
        return "\n".join([str(self), *(f"  = note: {note}" for note in notes)])


class MissingDefaultLocaleError(LocaleGenError):
    """No default catalog is available, or it is empty.

    The default catalog defines the complete key set; without it neither
    the schema nor any fallback reference can be produced.
    """


class UnresolvedCatalogError(LocaleGenError):
    """A referenced locale has no catalog in storage."""


class SchemaConflictError(LocaleGenError):
    """Key paths cannot be compiled into a record schema.

    Examples:
    - ``home`` holds a string while ``home.title`` makes it a group
    - the same key path appears twice
    - a key path nests deeper than MAX_DEPTH
    """


class IdentifierCollisionError(SchemaConflictError):
    """Two distinct names produce the same generated identifier.

    Example:
        ``sign-in`` and ``sign_in`` in one group both become ``sign_in``.
    """


class InstanceMismatchError(LocaleGenError):
    """Instance entries do not match the schema's leaf paths."""


class CatalogFormatError(LocaleGenError):
    """Catalog input is unreadable or structurally invalid.

    Attributes:
        source_path: Catalog file involved, if the error came from a file
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str | None = None) -> None:
        """Initialize CatalogFormatError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Catalog file involved, if any
        """
        super().__init__(message)
        self.source_path = source_path


class DuplicateKeyPathError(CatalogFormatError):
    """A key path appears more than once in one catalog."""


class ConfigurationError(LocaleGenError):
    """Generator configuration is missing or invalid."""


class GenerationStageError(LocaleGenError):
    """Collaborator failure (I/O, storage) surfaced during a generation stage.

    The original exception is chained as ``__cause__``.

    Attributes:
        stage: Name of the stage in which the failure surfaced
        locale: Locale being processed, if any
    """

    def __init__(self, message: str | Diagnostic, *, stage: str, locale: str | None = None) -> None:
        """Initialize GenerationStageError.

        Args:
            message: Error message string OR Diagnostic object
            stage: Name of the failing stage
            locale: Locale being processed, if any
        """
        super().__init__(message)
        self.stage = stage
        self.locale = locale

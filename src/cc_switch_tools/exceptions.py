"""Exception classes for cc-switch-tools operations."""


class CCSwitchToolsError(Exception):
    """Base exception for cc-switch-tools operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InstallationError(CCSwitchToolsError):
    """Raised when installing the cc-switch binary fails.

    Attributes:
        stage: Installer stage that was running when the error occurred.
        hint: Optional follow-up line shown after the error.

    """

    error_prefix = "Installation failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize installation error.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.
            hint: Optional follow-up line shown after the error.

        """
        super().__init__(message, target)
        self.hint = hint
        self.stage: str | None = None


class UnsupportedPlatformError(InstallationError):
    """Raised when the host OS or architecture has no release asset."""

    error_prefix = "Unsupported platform"


class MissingDependencyError(InstallationError):
    """Raised when no usable external tool is available."""

    error_prefix = "Missing dependency"


class NetworkError(InstallationError):
    """Raised when downloading a release asset fails."""

    error_prefix = "Download failed"


class ArchiveIntegrityError(InstallationError):
    """Raised when the downloaded archive lacks the expected binary."""

    error_prefix = "Invalid archive"


class ValidationError(CCSwitchToolsError):
    """Raised when a version string is malformed."""

    error_prefix = "Validation failed"


class MissingInputFileError(CCSwitchToolsError):
    """Raised when a manifest or documentation file does not exist."""

    error_prefix = "File not found"

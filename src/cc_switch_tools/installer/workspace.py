"""Temporary download workspace with guaranteed cleanup."""

import shutil
import tempfile
from pathlib import Path
from types import TracebackType

from cc_switch_tools.constants import TEMP_DIR_PREFIX
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


class TemporaryWorkspace:
    """Scoped guard owning a uniquely named temporary directory.

    The directory is created on ``__enter__`` and removed on ``__exit__``,
    which runs for normal completion, exceptions, task cancellation and
    KeyboardInterrupt alike.

    Example:
        >>> with TemporaryWorkspace() as workspace:
        ...     archive = workspace / "asset.tar.gz"

    """

    def __init__(
        self, root: Path | None = None, prefix: str = TEMP_DIR_PREFIX
    ) -> None:
        """Initialize workspace guard.

        Args:
            root: Parent directory (defaults to the system temp directory)
            prefix: Directory name prefix

        """
        self.root = root
        self.prefix = prefix
        self.path: Path | None = None

    def __enter__(self) -> Path:
        """Create the directory and return its path."""
        self.path = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.root))
        logger.debug("Created workspace: %s", self.path)
        return self.path

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Remove the directory; never suppresses the in-flight exception."""
        self.cleanup()

    def cleanup(self) -> None:
        """Remove the workspace directory if it still exists."""
        if self.path is not None and self.path.exists():
            shutil.rmtree(self.path, ignore_errors=True)
            logger.debug("Removed workspace: %s", self.path)
        self.path = None

import logging
from pathlib import Path

from simplestream.core.errors import FetchError

logger = logging.getLogger(__name__)


class FileDocumentSource:
    """Read a previously downloaded catalog from disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def fetch(self) -> str:
        logger.debug("Reading %s", self._path)
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(str(self._path), str(e)) from e

from __future__ import annotations
"""Output sink writing resolved content under the destination tree."""
import logging
from pathlib import Path
from typing import Optional

from fileinclude.core.errors import WriteFailure
from fileinclude.core.interfaces.fs import OutputSinkProtocol
from fileinclude.logging.helpers import get_logger


class OutputWriter(OutputSinkProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None, encoding: str = "utf-8") -> None:
        self._log = logger or get_logger("io.writer")
        self._encoding = encoding

    def write(self, destination: str, relpath: str, content: str) -> str:
        target = Path(destination) / relpath
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self._encoding)
        except OSError as exc:
            raise WriteFailure(target) from exc
        self._log.debug("✔ wrote %s", target)
        return str(target)

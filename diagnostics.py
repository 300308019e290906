import threading
from datetime import datetime
from pathlib import Path
from typing import Optional


class DiagnosticLog:
    """Append-only, tab-separated event log.

    A log created without a path is disabled and drops every write, so
    callers never have to check whether logging was requested.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path).expanduser() if path is not None else None
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def reset(self) -> None:
        if self.path is None:
            return
        with self._lock:
            self.path.write_text("", encoding="utf-8")

    def write(self, event: str, detail: str | None = None) -> None:
        if self.path is None:
            return
        timestamp = datetime.now().isoformat(timespec="seconds")
        message = detail.strip() if detail else ""
        line = f"{timestamp}\t{event.upper()}"
        if message:
            line = f"{line}\t{message}"
        with self._lock:
            with self.path.open("a", encoding="utf-8") as log:
                log.write(line + "\n")

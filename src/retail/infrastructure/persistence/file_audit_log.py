"""Plain-text, append-only implementation of AuditLog."""

from __future__ import annotations

from pathlib import Path

from retail.domain.repository.audit_log import AuditLog


class FileAuditLog(AuditLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- AuditLog interface ---------------------------------------------------

    def record(self, line: str) -> None:
        self._ensure_parent()
        # Append only; existing lines are never rewritten.
        with self._file_path.open("a", encoding="utf-8") as fh:
            fh.write(line.rstrip("\n") + "\n")

    # --- File helpers ---------------------------------------------------------

    def _ensure_parent(self) -> None:
        if not self._file_path.parent.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)

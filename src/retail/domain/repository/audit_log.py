"""Abstract sink for checkout audit lines.

Defined in the domain layer so the checkout flow never depends on
where the lines end up. The file-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuditLog(ABC):

    @abstractmethod
    def record(self, line: str) -> None:
        """Append one audit line. May raise OSError if the sink is unavailable."""

"""In-memory fakes for testing.

These implement the same abstract interfaces as the file-backed
infrastructure but keep everything in memory. No file I/O.
"""

from __future__ import annotations

from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.audit_log import AuditLog


class FakeAuditLog(AuditLog):

    def __init__(self) -> None:
        self.lines: list[str] = []

    def record(self, line: str) -> None:
        self.lines.append(line)


class FailingAuditLog(AuditLog):
    """Simulates a broken log sink; raises *error* on every write."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error if error is not None else OSError("disk full")
        self.attempts = 0

    def record(self, line: str) -> None:
        self.attempts += 1
        raise self.error


def scripted(*tokens: str):
    """Turn a fixed list of answers into a ``select_payment`` callable.

    Raises AssertionError if the code under test asks for more answers
    than the script provides, instead of looping forever.
    """
    remaining = iter(tokens)

    def _next() -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise AssertionError("input script exhausted") from None

    return _next


TSHIRT = Product(id="ABC", name="Tshirt", price=Money.of(600))
HOODIE = Product(id="DEF", name="Hoodie", price=Money.of(1200))

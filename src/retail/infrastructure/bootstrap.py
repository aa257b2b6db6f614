"""Composition root — wires concrete implementations together.

This is the only place in the codebase that knows about *all* layers.
It owns the defaults: the product catalog and the audit log location.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from retail.domain.model.cart import Cart
from retail.domain.model.catalog import Catalog
from retail.domain.model.ledger import OrderLedger
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.audit_log import AuditLog
from retail.infrastructure.persistence.file_audit_log import FileAuditLog

# Relative to the working directory the shop is started from.
DEFAULT_AUDIT_LOG = Path("log.txt")

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(id="ABC", name="Tshirt", price=Money.of(600)),
    Product(id="DEF", name="Hoodie", price=Money.of(1200)),
    Product(id="GHI", name="Joggers", price=Money.of(700)),
    Product(id="JKL", name="Sweater", price=Money.of(1500)),
    Product(id="MNO", name="Jacket", price=Money.of(2000)),
)


def default_catalog() -> Catalog:
    return Catalog(DEFAULT_PRODUCTS)


@dataclass
class Session:
    """Everything one interactive shopping session owns.

    Exactly one cart and one ledger exist per session; they are created
    here and handed to the use-case handlers rather than held globally.
    """

    catalog: Catalog
    audit_log: AuditLog
    cart: Cart = field(default_factory=Cart)
    ledger: OrderLedger = field(default_factory=OrderLedger)


def build_session(audit_log_path: Path = DEFAULT_AUDIT_LOG) -> Session:
    return Session(
        catalog=default_catalog(),
        audit_log=FileAuditLog(audit_log_path),
    )

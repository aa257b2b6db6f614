"""CLI commands and display helpers for the product catalog."""

from __future__ import annotations

import click

from retail.application.dto import ProductDTO
from retail.domain.model.catalog import Catalog
from retail.infrastructure.bootstrap import default_catalog


def display_products(catalog: Catalog) -> None:
    """Shared formatting for the catalog table."""
    products = [ProductDTO.from_domain(p) for p in catalog.list_all()]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Product ID':<12} {'Name':<20} {'Price':>10}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{p.id:<12} {p.name:<20} {p.price:>10}")


@click.command("products")
def product_list() -> None:
    """List all products in the catalog."""
    display_products(default_catalog())

"""Interactive shopping menu.

Every prompt here blocks on console input. Invalid input never leaves
the loop; it is answered with a message or a re-prompt.
"""

from __future__ import annotations

import click

from retail.application.add_to_cart import AddToCartHandler
from retail.application.checkout import CheckoutHandler
from retail.application.dto import CartDTO, OrderDTO
from retail.application.show_cart import ShowCartHandler
from retail.application.show_orders import ShowOrdersHandler
from retail.domain.exceptions import DomainException
from retail.domain.model.payment import PAYMENT_OPTIONS
from retail.infrastructure.bootstrap import Session
from retail.infrastructure.cli.product_commands import display_products

_YES_NO = click.Choice(["yes", "no"], case_sensitive=False)


def _ask_yes_no(text: str) -> bool:
    """Prompt until the user types YES or NO (any case)."""
    answer = click.prompt(
        text,
        value_proc=lambda raw: _YES_NO.convert(raw.strip(), None, None),
    )
    return answer.lower() == "yes"


def _display_cart(cart: CartDTO) -> None:
    click.echo(f"{'ID':<10} {'Name':<20} {'Price':>10} {'Qty':>5}")
    click.echo("-" * 48)
    for line in cart.lines:
        click.echo(
            f"{line.product_id:<10} {line.product_name:<20} "
            f"{line.unit_price:>10} {line.quantity:>5}"
        )


def _display_order(dto: OrderDTO) -> None:
    click.echo()
    click.echo(f"Order ID: {dto.id}")
    click.echo(f"Total Amount: {dto.total}")
    click.echo(f"Payment Method: {dto.payment_method_name}")
    click.echo(f"Created: {dto.created_at}")
    click.echo("Order Details:")
    click.echo(f"  {'Product ID':<12} {'Name':<20} {'Price':>10} {'Quantity':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<12} {item.product_name:<20} "
            f"{item.unit_price:>10} {item.quantity:>10}"
        )


# --- Menu actions -------------------------------------------------------------


def _shop_products(session: Session) -> None:
    display_products(session.catalog)
    handler = AddToCartHandler(catalog=session.catalog, cart=session.cart)

    while True:
        product_id = click.prompt("Enter Product ID to add to cart")
        if handler.handle(product_id) is None:
            click.echo("Invalid Product ID.")
            continue
        click.echo("Product added successfully!")
        if not _ask_yes_no("Add another product? (YES/NO)"):
            return


def _checkout(session: Session) -> None:
    cart = ShowCartHandler(session.cart).handle()
    click.echo(f"Total Amount: {cart.total}")
    click.echo("Select Payment Method:")
    for key, label in PAYMENT_OPTIONS:
        click.echo(f"{key}. {label}")

    handler = CheckoutHandler(
        cart=session.cart,
        ledger=session.ledger,
        audit_log=session.audit_log,
    )
    result = handler.handle(
        select_payment=lambda: click.prompt("Enter choice"),
        on_invalid_choice=lambda _token: click.echo("Invalid choice. Try again."),
    )

    click.echo(result.confirmation)
    if not result.audit_recorded:
        click.echo("Warning: the audit log could not be written.", err=True)
    click.echo("You have successfully checked out the products!")


def _view_cart(session: Session) -> None:
    cart = ShowCartHandler(session.cart).handle()
    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    _display_cart(cart)
    if _ask_yes_no("Checkout all products? (YES/NO)"):
        _checkout(session)


def _view_orders(session: Session) -> None:
    orders = ShowOrdersHandler(session.ledger).handle()
    if not orders:
        click.echo("No orders have been made yet.")
        return
    for dto in orders:
        _display_order(dto)


_ACTIONS = {
    "1": _shop_products,
    "2": _view_cart,
    "3": _view_orders,
}


@click.command("menu")
@click.pass_obj
def menu(session: Session) -> None:
    """Run the interactive shopping menu."""
    while True:
        click.echo()
        click.echo("=== MENU ===")
        click.echo("1. View Products")
        click.echo("2. View Shopping Cart")
        click.echo("3. View Orders")
        click.echo("4. Exit")
        choice = click.prompt("Enter your choice").strip()

        if choice == "4":
            return

        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid option.")
            continue

        try:
            action(session)
        except DomainException as exc:
            raise click.ClickException(str(exc))

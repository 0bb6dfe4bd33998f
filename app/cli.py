# app/cli.py
import click
from flask.cli import with_appcontext

from .errors import CheckoutError, classify
from .extensions import get_processor
from .services.checkout_service import quote_promotion
from .services.validation import ValidationPolicy, validate_booking
from .utils.money import format_usd

@click.command("check-promo")
@click.argument("code")
@click.option("--total", required=True, help="Booking total in dollars, e.g. 200 or 75.50")
@with_appcontext
def check_promo(code, total):
    """Resolve CODE against Stripe and show what it would take off TOTAL."""
    policy = ValidationPolicy(required_fields=("promoCode",), require_dates=False)
    try:
        booking = validate_booking({"total": total, "promoCode": code}, policy)
        result = quote_promotion(get_processor(), booking)
    except CheckoutError as e:
        _, message, kind = classify(e)
        click.echo(f"{message} [{kind}]", err=True)
        raise click.exceptions.Exit(1)
    click.echo(f"Promo code: {booking.promo_code} ({result.promo_code_id})")
    click.echo(f"Discount: {format_usd(result.discount)}")
    click.echo(f"Adjusted total: {format_usd(result.adjusted_total)}")

def register_cli(app):
    app.cli.add_command(check_promo)

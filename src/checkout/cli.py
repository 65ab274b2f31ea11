"""
Command Line Interface for Checkout
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .catalog import demo_catalog
from .session import Checkout
from .formatter import ReceiptFormatter, DEFAULT_CURRENCY
from .exceptions import CheckoutError, UnknownProduct

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("checkout")

app = typer.Typer(
    name="checkout",
    help="Supermarket checkout: total a basket of scanned product codes",
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"Checkout version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    codes: Optional[List[str]] = typer.Argument(None, help="Product codes to scan, in order"),
    itemized: bool = typer.Option(
        False,
        "--itemized",
        "-i",
        help="Show an itemized receipt before the total"
    ),
    currency: str = typer.Option(
        DEFAULT_CURRENCY,
        "--currency",
        help="Currency suffix for printed amounts"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        _run_checkout(codes or [], itemized, currency)

    except UnknownProduct as e:
        logger.debug(f"Scan aborted: {e}")
        console.print(f"Unknown product {escape(e.code)}", highlight=False)
        raise typer.Exit(code=1)
    except CheckoutError as e:
        logger.error(f"Checkout error: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Full traceback:")
        raise typer.Exit(code=1)


def _run_checkout(codes: List[str], itemized: bool, currency: str) -> None:
    """
    Scan every code against the demo catalog and print the total
    """
    checkout = Checkout(demo_catalog())

    logger.debug(f"Scanning {len(codes)} code(s)")
    checkout.scan_all(codes)

    total = checkout.total()
    formatter = ReceiptFormatter(console=console, currency=currency)

    if itemized:
        console.print(formatter.format_receipt(checkout.line_items(), total))

    console.print()
    console.print(escape(formatter.format_total(total)), highlight=False)


if __name__ == "__main__":
    typer.run(main)

import argparse
import logging
import sys

from orderflow._version import __version__
from orderflow.cli import checkout, demo, quote, strategies
from orderflow.cli.exitcodes import EXIT_ENGINE_ERROR, exit_code_from_error
from orderflow.order.capability import Capability

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="orderflow", description="Orderflow: order checkout with pluggable strategies")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # demo
    sub.add_parser("demo", help="Run the reference order (two items, card, courier, email, 10%% over 1000).")

    # checkout
    co = sub.add_parser("checkout", help="Price and process an order.")
    co.add_argument("config", nargs="?", default=None, help="Order file (default: ./order.yaml if present).")
    co.add_argument("--payment", default=None, help="Payment strategy name (e.g. credit_card).")
    co.add_argument("--delivery", default=None, help="Delivery strategy name (e.g. courier).")
    co.add_argument("--notification", default=None, help="Notification strategy name (e.g. email).")
    co.add_argument("--item", dest="items", action="append", default=[], help="NAME=PRICE (repeatable).")
    co.add_argument(
        "--discount", dest="discounts", action="append", default=[], help="THRESHOLD:PERCENTAGE (repeatable)."
    )
    co.add_argument(
        "--charge-discounted",
        dest="charge_discounted",
        action="store_true",
        help="Charge the discounted price instead of the order total.",
    )

    # quote
    q = sub.add_parser("quote", help="Price an order without processing it.")
    q.add_argument("config", nargs="?", default=None, help="Order file (default: ./order.yaml if present).")
    q.add_argument("--item", dest="items", action="append", default=[], help="NAME=PRICE (repeatable).")
    q.add_argument(
        "--discount", dest="discounts", action="append", default=[], help="THRESHOLD:PERCENTAGE (repeatable)."
    )
    q.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    q.add_argument("--details", action="store_true", help="Also show the order total and the discount.")

    # strategies
    st = sub.add_parser("strategies", help="List registered strategies.")
    st.add_argument(
        "--capability", choices=[c.value for c in Capability], default=None, help="Only list one capability."
    )

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.cmd == "demo":
            return demo.run()

        if args.cmd == "checkout":
            return checkout.run(
                config=args.config,
                payment=args.payment,
                delivery=args.delivery,
                notification=args.notification,
                items=args.items,
                discounts=args.discounts,
                charge_discounted=args.charge_discounted,
            )

        if args.cmd == "quote":
            return quote.run(
                config=args.config,
                items=args.items,
                discounts=args.discounts,
                fmt=args.format,
                verbose=args.details,
            )

        if args.cmd == "strategies":
            return strategies.list_strategies(capability=args.capability)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except Exception as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"orderflow: error: {e}", file=sys.stderr)
        return exit_code_from_error(e)

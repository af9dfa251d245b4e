# blink_invoice/main.py

import argparse
import json
import logging
import re
import sys

from blink_invoice.core.config import Settings, load_config
from blink_invoice.core.errors import BlinkError, ValidationError
from blink_invoice.models import Currency, format_usd, get_profile
from blink_invoice.services.blink import BlinkClient

logger = logging.getLogger("blink_invoice")


def parse_amount(text: str, name: str = "amount") -> int:
    text = text.strip()
    if not re.fullmatch(r"[0-9]+", text) or int(text) <= 0:
        raise ValidationError(f"{name} must be a positive integer")
    return int(text)


def build_parser(currency: Currency) -> argparse.ArgumentParser:
    profile = get_profile(currency)
    prog = "blink-invoice-usd" if currency == Currency.USD else "blink-invoice"
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"Create a {currency.value}-denominated Lightning invoice on Blink.",
    )
    parser.add_argument("amount", metavar=profile.amount_name, help=profile.amount_help)
    parser.add_argument("memo", nargs="*", help="optional memo attached to the invoice")
    parser.add_argument("--api-key", help="API key (default: BLINK_API_KEY or ~/.profile)")
    parser.add_argument("--api-url", help="GraphQL endpoint (default: BLINK_API_URL or api.blink.sv)")
    parser.add_argument("--timeout", type=float, help="seconds to wait for each HTTP round trip")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None, currency=Currency.BTC, session=None) -> int:
    load_config()
    profile = get_profile(currency)
    args = build_parser(profile.currency).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        amount = parse_amount(args.amount, profile.amount_name)
        memo = " ".join(args.memo) or None
        settings = Settings.from_env().override(
            api_key=args.api_key, api_url=args.api_url, timeout=args.timeout
        )
        result = BlinkClient(settings, session=session).create_invoice(amount, profile.currency, memo)
    except BlinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if profile.currency == Currency.USD:
        logger.info(f"Created USD invoice for {format_usd(amount)} ({result.satoshis} sats at current rate)")
    if profile.notice:
        logger.info(profile.notice)

    print(json.dumps(result.to_output(), indent=2))
    return 0


def run_btc():
    sys.exit(main(currency=Currency.BTC))


def run_usd():
    sys.exit(main(currency=Currency.USD))


if __name__ == "__main__":
    run_btc()

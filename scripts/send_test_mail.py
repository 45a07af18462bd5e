#!/usr/bin/env python3
"""
Send a one-off message with the current mail settings.

Reads MAIL_PROVIDER, SMTP_* and EMAILJS_* from the environment (or .env) and
prints the delivery result as JSON. Handy for checking credentials before
wiring mailhelper into an application.

Usage:
    python scripts/send_test_mail.py --to you@example.com
    CI=1 python scripts/send_test_mail.py --to you@example.com --html "<b>hi</b>"
"""

import argparse
import asyncio
import logging
import sys

from mailhelper import send_mail
from mailhelper.config import settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--to", required=True, action="append", help="Recipient (repeatable)")
    parser.add_argument("--from", dest="from_", default=None, help="Sender, defaults to SMTP_FROM")
    parser.add_argument("--subject", default="mailhelper test message")
    parser.add_argument("--text", default="This is a test message sent by mailhelper.")
    parser.add_argument("--html", default=None)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    print(f"Sending via {settings.mail_provider}{' (CI)' if settings.ci else ''}...")
    try:
        result = asyncio.run(
            send_mail(
                {
                    "from": args.from_,
                    "to": args.to,
                    "subject": args.subject,
                    "text": args.text,
                    "html": args.html,
                }
            )
        )
    except Exception as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(result.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

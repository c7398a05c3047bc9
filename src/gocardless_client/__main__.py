from __future__ import annotations

import argparse
import asyncio
import sys

from gocardless_client.app import LIST_REQUESTS, run_app


def main() -> None:
    parser = argparse.ArgumentParser(description="GoCardless API client")
    sub = parser.add_subparsers(dest="mode", required=True)

    list_parser = sub.add_parser("list", help="List every item of a resource, following cursors")
    list_parser.add_argument("resource", choices=sorted(LIST_REQUESTS))
    list_parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query filter, repeatable (e.g. --filter creditor=CR123)",
    )
    list_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Page size requested from the API (default: server default)",
    )
    list_parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Stop after printing N items (default: all)",
    )

    webhook_parser = sub.add_parser("webhook", help="Verify a webhook body and print its events")
    webhook_parser.add_argument("file", help="File holding the raw webhook body")
    webhook_parser.add_argument(
        "--signature",
        required=True,
        help="Value of the Webhook-Signature header",
    )
    args = parser.parse_args()

    if args.mode == "webhook":
        code = asyncio.run(run_app(mode="webhook", webhook_file=args.file, signature=args.signature))
    else:
        code = asyncio.run(
            run_app(
                mode="list",
                resource=args.resource,
                filters=args.filters,
                page_size=args.limit,
                max_items=args.max_items,
            )
        )
    sys.exit(code)


if __name__ == "__main__":
    main()

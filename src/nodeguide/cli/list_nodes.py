"""CLI entrypoint listing the nodes documented for one client/node type."""

from __future__ import annotations

import argparse

from nodeguide.catalog.errors import CatalogError
from nodeguide.catalog.service import build_catalog_service
from nodeguide.cli.common import EXIT_CONFIG_ERROR, EXIT_OK, exit_code_for, load_settings, print_json, report_error
from nodeguide.fetch import create_fetcher
from nodeguide.renderers import render_catalog


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List node graph entries for a client type and node type")
    parser.add_argument("--client-type", required=True, help="Client type, e.g. 服务器节点 or 客户端节点")
    parser.add_argument("--node-type", required=True, help="Node type, e.g. 查询节点")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of Markdown")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        report_error(exc)
        return EXIT_CONFIG_ERROR

    fetcher = create_fetcher(settings)
    service = build_catalog_service(settings, fetcher=fetcher)
    try:
        summaries = service.list_catalog(args.client_type, args.node_type)
    except CatalogError as exc:
        report_error(exc)
        return exit_code_for(exc)
    finally:
        fetcher.close()

    if args.json:
        print_json(
            {
                "client_type": args.client_type,
                "node_type": args.node_type,
                "nodes": [summary.to_dict() for summary in summaries],
            }
        )
    else:
        print(render_catalog(summaries=summaries, client_type=args.client_type, node_type=args.node_type), end="")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

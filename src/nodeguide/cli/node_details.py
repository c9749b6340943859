"""CLI entrypoint printing the parameters and example of a single node."""

from __future__ import annotations

import argparse

from nodeguide.catalog.errors import CatalogError
from nodeguide.catalog.service import build_catalog_service
from nodeguide.cli.common import EXIT_CONFIG_ERROR, EXIT_OK, exit_code_for, load_settings, print_json, report_error
from nodeguide.fetch import create_fetcher
from nodeguide.renderers import render_node_details


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show parameter details for one node graph entry")
    parser.add_argument("--client-type", required=True, help="Client type, e.g. 服务器节点 or 客户端节点")
    parser.add_argument("--node-type", required=True, help="Node type, e.g. 查询节点")
    parser.add_argument("--name", required=True, help="Exact node name as listed by list_nodes")
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
        record = service.get_record(args.client_type, args.node_type, args.name.strip())
    except CatalogError as exc:
        report_error(exc)
        return exit_code_for(exc)
    finally:
        fetcher.close()

    if args.json:
        print_json(record.to_dict())
    else:
        print(render_node_details(record), end="")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

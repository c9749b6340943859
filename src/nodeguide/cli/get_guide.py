"""CLI entrypoint printing the full text of one tutorial page."""

from __future__ import annotations

import argparse

from nodeguide.catalog.errors import CatalogError
from nodeguide.cli.common import EXIT_CONFIG_ERROR, EXIT_OK, exit_code_for, load_settings, print_json, report_error
from nodeguide.fetch import create_fetcher
from nodeguide.guide import GuideBrowser
from nodeguide.renderers import render_guide


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch a tutorial page by id")
    parser.add_argument("--id", required=True, help="Tutorial page id, e.g. mh29wpicgvh0")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of Markdown")
    args = parser.parse_args(argv)

    document_id = args.id.strip()
    if not document_id:
        parser.error("--id cannot be empty")

    try:
        settings = load_settings()
    except ValueError as exc:
        report_error(exc)
        return EXIT_CONFIG_ERROR

    fetcher = create_fetcher(settings)
    try:
        page = GuideBrowser(fetcher).guide(document_id)
    except CatalogError as exc:
        report_error(exc)
        return exit_code_for(exc)
    finally:
        fetcher.close()

    if args.json:
        print_json(page.to_dict())
    else:
        print(render_guide(page), end="")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

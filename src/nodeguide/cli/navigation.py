"""CLI entrypoint printing the tutorial site's navigation menu."""

from __future__ import annotations

import argparse

from nodeguide.catalog.errors import CatalogError
from nodeguide.cli.common import EXIT_CONFIG_ERROR, EXIT_OK, exit_code_for, load_settings, print_json, report_error
from nodeguide.fetch import create_fetcher
from nodeguide.guide import GuideBrowser
from nodeguide.renderers import render_navigation


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List tutorial pages from the site navigation menu")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of Markdown")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        report_error(exc)
        return EXIT_CONFIG_ERROR

    fetcher = create_fetcher(settings)
    try:
        items = GuideBrowser(fetcher).navigation()
    except CatalogError as exc:
        report_error(exc)
        return exit_code_for(exc)
    finally:
        fetcher.close()

    if args.json:
        print_json([item.to_dict() for item in items])
    else:
        print(render_navigation(items), end="")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

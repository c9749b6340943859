"""Long-running entrypoint answering JSON-lines tool requests on stdin.

One catalog service, and so one page cache, serves every request for the life
of the process. Responses are written to stdout one JSON object per line; logs
stay on stderr or the configured log file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from nodeguide.catalog.service import build_catalog_service
from nodeguide.cli.common import EXIT_CONFIG_ERROR, EXIT_OK, load_settings, report_error
from nodeguide.fetch import create_fetcher
from nodeguide.guide import GuideBrowser
from nodeguide.tools import ToolDispatcher

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Answer list_nodes, node_details, navigation and get_guide requests read as JSON lines"
    )
    parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        report_error(exc)
        return EXIT_CONFIG_ERROR

    source = stdin or sys.stdin
    sink = stdout or sys.stdout
    fetcher = create_fetcher(settings)
    dispatcher = ToolDispatcher(build_catalog_service(settings, fetcher=fetcher), GuideBrowser(fetcher))
    logger.info("Serving tools: %s", ", ".join(dispatcher.tool_names))

    handled = 0
    try:
        for line in source:
            if not line.strip():
                continue
            response = dispatcher.handle_line(line)
            sink.write(json.dumps(response, ensure_ascii=False) + "\n")
            sink.flush()
            handled += 1
    finally:
        fetcher.close()

    logger.info("Input closed after %s request(s)", handled)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

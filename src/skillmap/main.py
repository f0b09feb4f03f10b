"""
Application Initialization
==========================
Wires the application together and starts the Qt event loop.

It:
1. Reads the command line (document path, log level, log file).
2. Sets up logging.
3. Creates the QApplication.
4. Creates the main window for the document (or the bundled sample map)
   and starts loading it.
"""
import argparse
import sys
from typing import List, Optional

from skillmap.application import create_app
from skillmap.config import DEFAULT_MAP_PATH
from skillmap.logging_config import setup_logging
from skillmap.view.main_window import MainWindow


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="skillmap", description="Interactive skill map.")
    parser.add_argument("document", nargs="?", default=DEFAULT_MAP_PATH,
                        help="JSON skill map document (default: bundled sample)")
    parser.add_argument("--log-level", default="INFO",
                        help="DEBUG, INFO, WARNING or ERROR (DEBUG also lists omitted edges)")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    app = create_app()

    window = MainWindow(args.document)
    window.show()
    # Load after show() so the canvas has its final size when the map is mounted
    window.start_loading()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

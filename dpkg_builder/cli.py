"""
Command-line interface for dpkg-builder.
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

import urllib3

from dpkg_builder.config import APP_NAME, APP_USAGE, APP_VERSION, DEFAULT_BASE_URL
from dpkg_builder.core.fetcher import fetch_package
from dpkg_builder.errors import DpkgBuilderError, UsageError
from dpkg_builder.session import build_session
from dpkg_builder.utils.log import log, setup_logging


def _add_fetch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "package", nargs="?",
        help="Source package name (e.g. hello)",
    )
    parser.add_argument(
        "--base-url", default=DEFAULT_BASE_URL,
        help=f"Distribution index URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--output", default=".",
        help="Existing directory in which <package>/ is created (default: .)",
    )
    parser.add_argument(
        "--no-extract", dest="extract", action="store_false", default=True,
        help="Only download the files, do not run dpkg-source -x",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Do not show a download progress bar",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {APP_NAME} fetch hello\n"
            f"  {APP_NAME} fetch hello --no-extract --output src\n"
            f"  {APP_NAME} --debug --log-file fetch.log fetch hello\n"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_cmd = subparsers.add_parser(
        "build", help="Download and build the package",
    )
    build_cmd.add_argument("package", nargs="?", help="Source package name")

    fetch_cmd = subparsers.add_parser(
        "fetch", help="Only download the package files",
    )
    _add_fetch_arguments(fetch_cmd)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def validate_args(args: argparse.Namespace) -> str:
    """Return the package name or raise UsageError naming the sub-command."""
    if not args.package:
        raise UsageError(f"{args.command}: no package name provided")
    return args.package


def command_build(args: argparse.Namespace) -> None:
    pkg_name = validate_args(args)
    log.info("Building %s", pkg_name)
    # TODO: run dpkg-buildpackage in the extracted tree once fetch is wired in.


def command_fetch(args: argparse.Namespace) -> None:
    pkg_name = validate_args(args)
    log.info("Fetching %s", pkg_name)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    source = fetch_package(
        pkg_name,
        session=build_session(verify_ssl=args.verify_ssl),
        base_url=args.base_url,
        root=Path(args.output),
        extract_sources=args.extract,
        progress=args.progress,
    )
    log.info("Files saved in: %s", (Path(args.output) / source.directory).resolve())


_COMMANDS = {
    "build": command_build,
    "fetch": command_fetch,
}


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    t0 = time.monotonic()
    try:
        _COMMANDS[args.command](args)
    except UsageError as exc:
        log.error("%s", exc)
        sys.exit(1)
    except DpkgBuilderError as exc:
        log.critical("[FATAL] %s", exc)
        sys.exit(1)
    log.debug("Total elapsed time: %.1f s", time.monotonic() - t0)


if __name__ == "__main__":
    main()

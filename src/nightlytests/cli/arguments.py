"""Argument parser for the nightlytests CLI."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nightlytests",
        description="nightlytests - keep nightly-only tests out of ordinary builds.",
    )

    # Global options
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show nightlytests version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )

    subparsers = parser.add_subparsers(dest="command")

    check = subparsers.add_parser(
        "check",
        help="Apply the plugin to a project directory and show the excluded tests.",
    )
    check.add_argument(
        "path",
        nargs="?",
        default=".",
        type=Path,
        help="Project directory (default: current directory).",
    )
    check.add_argument(
        "--root",
        metavar="DIR",
        type=Path,
        default=None,
        help="Root project directory (default: git repository root).",
    )
    check.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )

    return parser

"""Module: main.py

Author: Michael Economou
Date: 2026-10-05

Command-line front end. Each sub-command is one rename mode; the trailing
paths play the role of a drop.

    dropname serial --prefix Vacation_ --pad 3 IMG1.png IMG2.png
    dropname replace --regex "(\\d+)" "n$1" *.jpg --dry-run
    dropname extension .jpeg photo.jpg
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from dotenv import find_dotenv, load_dotenv
from tqdm import tqdm

from dropname.config import APP_NAME, APP_VERSION, DEFAULT_NEW_EXTENSION, DEFAULT_SERIAL_PADDING
from dropname.controllers import RenameController
from dropname.core.rename import BatchReport
from dropname.models.rename_command import CommandError, RenameCommand
from dropname.utils.logging.logger_factory import get_cached_logger
from dropname.utils.logging.logger_setup import ConfigureLogger
from dropname.utils.shared.json_config_manager import JSONConfigManager

logger = get_cached_logger(__name__)

EXIT_OK = 0
EXIT_FAILURES = 1


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--dry-run", action="store_true", help="Show the new names without renaming"
    )
    common.add_argument("--json", action="store_true", help="Print results as JSON")
    common.add_argument(
        "--manual",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep one serial counter across runs (persisted)",
    )
    common.add_argument(
        "--reset-counter", action="store_true", help="Restart the manual counter from --start"
    )
    common.add_argument("--config-dir", help="Directory holding config.json")
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Batch-rename files with one deterministic naming rule.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    common = _common_parser()
    modes = parser.add_subparsers(dest="mode", required=True, metavar="MODE")

    fixed = modes.add_parser("fixed", parents=[common], help="Give every file the same name")
    fixed.add_argument("name")
    fixed.add_argument("--no-keep-ext", dest="keep_ext", action="store_false")

    serial = modes.add_parser("serial", parents=[common], help="Number the files")
    serial.add_argument("--prefix", default="")
    serial.add_argument("--suffix", default="")
    serial.add_argument("--start", type=int, default=None, help="First number")
    serial.add_argument("--pad", type=int, default=DEFAULT_SERIAL_PADDING, help="Minimum digits")
    serial.add_argument("--keep-original", action="store_true", help="Keep the original stem")
    serial.add_argument("--no-keep-ext", dest="keep_ext", action="store_false")

    replace = modes.add_parser("replace", parents=[common], help="Replace text in the stem")
    replace.add_argument("from_text", metavar="FROM")
    replace.add_argument("to_text", metavar="TO")
    replace.add_argument("--regex", action="store_true", help="FROM is a regular expression")

    add = modes.add_parser("add", parents=[common], help="Add text to the stem")
    add.add_argument("text")
    add.add_argument("--position", choices=("start", "end"), default="end")

    trim = modes.add_parser("trim", parents=[common], help="Remove characters from the stem")
    trim.add_argument("count", type=int)
    trim.add_argument("--position", choices=("start", "end"), default="end")

    extension = modes.add_parser("extension", parents=[common], help="Change the extension")
    extension.add_argument("new_ext", nargs="?", default=DEFAULT_NEW_EXTENSION)

    case = modes.add_parser("case", parents=[common], help="Upper- or lower-case the stem")
    case.add_argument("case_mode", choices=("upper", "lower"))

    convert = modes.add_parser("convert", parents=[common], help="Full/half-width conversion")
    convert.add_argument("width_mode", choices=("zenkaku", "hankaku"))

    # Dropped paths come after the mode arguments
    for sub in (fixed, serial, replace, add, trim, extension, case, convert):
        sub.add_argument("paths", nargs="+", metavar="PATH", help="Files to rename, in order")

    return parser


def build_payload(args: argparse.Namespace, serial_start: int) -> dict[str, Any]:
    """Turn parsed arguments into the {"mode", "config"} command payload."""
    mode = args.mode
    if mode == "fixed":
        config = {"name": args.name, "keep_ext": args.keep_ext}
    elif mode == "serial":
        config = {
            "prefix": args.prefix,
            "suffix": args.suffix,
            "number": serial_start,
            "pad": args.pad,
            "keep_ext": args.keep_ext,
            "keep_original": args.keep_original,
        }
    elif mode == "replace":
        config = {"from": args.from_text, "to": args.to_text, "use_regex": args.regex}
    elif mode == "add":
        config = {"text": args.text, "position": args.position}
    elif mode == "trim":
        config = {"count": args.count, "position": args.position}
    elif mode == "extension":
        config = {"new_ext": args.new_ext}
    elif mode == "case":
        config = {"mode": args.case_mode}
    else:
        config = {"mode": args.width_mode}
    return {"mode": mode, "config": config}


def print_report(report: BatchReport, as_json: bool, stream=None) -> None:
    stream = stream or sys.stdout
    if as_json:
        data = {
            "dry_run": report.dry_run,
            "next_sequence": report.next_sequence,
            "results": report.to_payload(),
        }
        json.dump(data, stream, indent=2, ensure_ascii=False)
        stream.write("\n")
        return

    for result in report.results:
        if result.succeeded:
            stream.write(f"{result.original_path} -> {result.new_name}\n")
        else:
            stream.write(f"{result.original_path}: {result.status_text}\n")

    prefix = "[dry run] " if report.dry_run else ""
    stream.write(f"{prefix}{report.success_count} renamed, {report.error_count} failed\n")


def main(argv: Sequence[str] | None = None) -> int:
    # DROPNAME_DATA_DIR and friends may come from a .env file in the working tree
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)

    ConfigureLogger(console_level=logging.INFO if args.verbose else None)

    config_manager = JSONConfigManager(APP_NAME, config_dir=args.config_dir)
    # A preview applies the counter options in memory only
    controller = RenameController(config_manager=config_manager, autosave=not args.dry_run)
    config_manager.load()

    if getattr(args, "start", None) is not None:
        controller.set_serial_start(args.start)
    if args.manual is not None:
        controller.set_manual_increment(args.manual)
    if args.reset_counter:
        controller.reset_counter()

    try:
        command = RenameCommand.from_payload(build_payload(args, controller.serial_start))
    except CommandError as e:
        parser.error(str(e))

    logger.debug("[main] Command: %s", command.to_payload(), extra={"dev_only": True})
    # Progress goes to stderr and only shows on a terminal
    with tqdm(
        total=len(args.paths),
        desc="Renaming",
        unit="file",
        file=sys.stderr,
        leave=False,
        disable=args.json or None,
    ) as progress:

        def _advance(_result) -> None:
            progress.update(1)

        with controller.file_renamed.connected(_advance):
            report = controller.handle_drop(args.paths, command, dry_run=args.dry_run)

    print_report(report, args.json)
    return EXIT_OK if report.all_succeeded else EXIT_FAILURES


if __name__ == "__main__":
    sys.exit(main())

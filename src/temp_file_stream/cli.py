"""Unified CLI entry point for temp-file-stream samples."""

import argparse
import asyncio
import sys

from dotenv import load_dotenv


def _target(args):
    from .core import ROOT_ENV_VAR, TempFileStreamConfig, get_stream_config, require_env

    if args.dir:
        return args.dir
    if args.require_root:
        return TempFileStreamConfig(
            require_env(ROOT_ENV_VAR, description="root temp folder")
        )
    return get_stream_config()


def cmd_basic(args):
    from .samples.basic_usage import write_temp_file

    asyncio.run(write_temp_file(_target(args), logger=args.logger))


def cmd_read_write(args):
    from .samples.writers_and_readers import write_and_read

    write_and_read(
        _target(args), logger=args.logger, line_count=args.lines, wait=args.wait
    )


def cmd_bulk(args):
    from .samples.bulk import create_many

    create_many(args.count, _target(args), logger=args.logger)


def cmd_download(args):
    from .samples.download import spool_url

    result = spool_url(args.url, _target(args), logger=args.logger)
    print(f"{result.size} bytes, sha1 {result.sha1}")


def cmd_where(args):
    from .core.paths import resolve_directory

    print(resolve_directory(_target(args)))


def main(argv=None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="tfs", description="Temporary file stream samples"
    )
    parser.add_argument(
        "--dir", help="Temp folder (or TEMP_FILE_STREAM_ROOT env)", default=None
    )
    parser.add_argument(
        "--require-root",
        action="store_true",
        help="Exit unless --dir or TEMP_FILE_STREAM_ROOT is set",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Raise cleanup failures instead of logging them",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("basic", help="Write a few bytes and drop the file")

    rw = sub.add_parser("read-write", help="Write lines, read them back")
    rw.add_argument("--lines", type=int, default=5, help="Number of lines")
    rw.add_argument(
        "--wait", action="store_true", help="Pause before reading back"
    )

    bulk = sub.add_parser("bulk", help="Open many streams in one folder")
    bulk.add_argument("--count", type=int, default=100, help="Number of streams")

    dl = sub.add_parser("download", help="Spool a URL into a temp stream")
    dl.add_argument("url", help="URL to download")

    sub.add_parser("where", help="Print the resolved temp folder")

    args = parser.parse_args(argv)

    if args.strict:
        args.logger = None
    else:
        from .core import setup_logging

        args.logger = setup_logging()

    handlers = {
        "basic": cmd_basic,
        "read-write": cmd_read_write,
        "bulk": cmd_bulk,
        "download": cmd_download,
        "where": cmd_where,
    }
    try:
        handlers[args.command](args)
    except (OSError, ValueError) as e:
        print(f"Error: {args.command} failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

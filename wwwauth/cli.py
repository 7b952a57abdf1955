#!/usr/bin/env python

"""
CLI interface to wwwauth
"""

from configparser import ConfigParser, SectionProxy
from argparse import ArgumentParser
import sys
from typing import List, Optional

from wwwauth import __version__
from wwwauth.formatter import find_formatter, available_formatters
from wwwauth.headers import InvalidFormatError
from wwwauth.message import HeaderMessage

DEFAULT_CONFIG = {
    "wwwauth": {
        "output_format": "text",
        "combine": "False",
        "tty_colour": "True",
    }
}


def load_config(config_file: Optional[str] = None) -> SectionProxy:
    """
    Return the wwwauth section of the configuration, read over the defaults.
    """
    config_parser = ConfigParser()
    config_parser.read_dict(DEFAULT_CONFIG)
    if config_file:
        with open(config_file, encoding="utf-8") as fh:
            config_parser.read_file(fh)
    return config_parser["wwwauth"]


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(
        description="Parse WWW-Authenticate Digest challenges and show what's in them."
    )
    parser.add_argument(
        "header_lines",
        nargs="*",
        metavar="HEADER",
        help='header line(s), e.g. \'WWW-Authenticate: Digest realm="x"\'; '
        "read from STDIN, one per line, if none are given",
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        dest="config_file",
        help="configuration file to read",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=available_formatters(),
        help="output format",
    )
    parser.add_argument(
        "-m",
        "--combine",
        action="store_true",
        dest="combine",
        help="also show the headers serialised together",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)

    config = load_config(args.config_file)
    if args.output_format:
        config["output_format"] = args.output_format
    if args.combine:
        config["combine"] = "True"

    header_lines = args.header_lines or [
        line.rstrip("\r\n") for line in sys.stdin if line.strip()
    ]

    message = HeaderMessage()
    formatter = find_formatter(config["output_format"], "text")(
        config,
        message,
        output,
        {"tty_out": sys.stdout.isatty() and config.getboolean("tty_colour")},
    )
    formatter.start_output()
    try:
        message.process_header_lines(header_lines)
        formatter.finish_output()
    except InvalidFormatError as why:
        formatter.error_output(str(why))
        return 1
    return 0


def output(out: str) -> None:
    sys.stdout.write(out)


if __name__ == "__main__":
    sys.exit(main())

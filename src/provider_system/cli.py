"""Console script running the system provider standalone.

Outside a plugin host, ``provider-system`` evaluates the checks once,
prints the report and exits with status 0. It exits with status 1 only
if the evaluation itself breaks down.
"""

from __future__ import annotations

import argparse
import sys
import typing

from .provider import SystemProvider
from .runtime import Runtime, guarded

PROG = "provider-system"


class _ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors, matching the runtime's error status."""

    def exit(
        self, status: int = 0, message: typing.Optional[str] = None
    ) -> typing.NoReturn:
        if message:
            self._print_message(message, sys.stderr)
        sys.exit(1 if status else 0)


def setup_argparser(
    name: typing.Optional[str] = PROG,
    version: typing.Optional[str] = None,
    description: typing.Optional[str] = None,
    epilog: typing.Optional[str] = None,
) -> argparse.ArgumentParser:
    """
    Set up and configure the argument parser of the console script.

    :param name: The program name shown in usage messages.
    :param version: The version number. If provided, it is included in
        the parser description and a ``-V/--version`` option is added.
    :param description: A detailed description of the plugin's
        functionality, appended after a blank line.
    :param epilog: Additional information to display after the help message.

    :returns: A configured ArgumentParser instance with RawDescriptionHelpFormatter
        and 80 character width.
    """
    description_lines: list[str] = []

    if version is not None:
        description_lines.append(f"version {version}")

    if description is not None:
        description_lines.append("")
        description_lines.append(description)

    parser: argparse.ArgumentParser = _ArgumentParser(
        prog=name,
        formatter_class=lambda prog: argparse.RawDescriptionHelpFormatter(
            prog, width=80
        ),
        description="\n".join(description_lines),
        epilog=epilog,
    )

    if version is not None:
        parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {version}",
        )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase output verbosity (use up to 3 times)",
    )

    return parser


@guarded
def main(argv: typing.Optional[list[str]] = None) -> None:
    provider = SystemProvider()
    info = provider.info()
    parser = setup_argparser(
        PROG,
        version=info.version,
        description="{0}: {1}".format(info.name, info.description),
    )
    args = parser.parse_args(argv)
    Runtime().execute(provider, args.verbose)


if __name__ == "__main__":
    main()

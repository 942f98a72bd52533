"""Command line for listing SSR entries across environments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from .environment import Environment
from .errors import InvalidEnvironmentTarget, SsrError
from .retriever import SsrRetriever

URL = "https://ssr.xenial.com"
_VERSION = "0.1.0"
_MAX_ENV_VALUES = 4

_EPILOG = (
    "Name, description, and key returned by the ssr service will be evaluated "
    "for `filter` as a substring. If omitted then all returned values from the "
    "`url` will be parsed and returned\n\n"
    "Omitting `TARGET_ENVIRONMENT` will result in all target environments being "
    "retrieved and processed\n\n"
    "`url` should not contain the target environment option as that will be "
    "added at runtime"
)


@dataclass
class Cli:
    """Parsed command line options."""

    target_environment: list[Environment] = field(default_factory=list)
    url: str = URL
    filter: str | None = None

    def get_targets(self) -> list[Environment]:
        """The requested environments, or all of them when none were given."""
        if not self.target_environment:
            return list(Environment)
        return list(self.target_environment)


def _environment_list(text: str) -> list[Environment]:
    try:
        return [Environment.parse(part) for part in text.split(",")]
    except InvalidEnvironmentTarget as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


class _EnvironmentsAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        flat = [env for group in values for env in group]
        if len(flat) > _MAX_ENV_VALUES:
            parser.error(
                f"{option_string} takes at most {_MAX_ENV_VALUES} values, got {len(flat)}"
            )
        current = getattr(namespace, self.dest) or []
        setattr(namespace, self.dest, current + flat)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        description="Retrieve SSR entries and group their URLs by environment.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-e",
        "--env",
        dest="target_environment",
        metavar="TARGET_ENVIRONMENT",
        nargs="*",
        type=_environment_list,
        action=_EnvironmentsAction,
        default=[],
        help="Environment to grab values for (dev, qa, uat, prod; comma separated)",
    )
    parser.add_argument(
        "-u", "--url", default=URL, help="Url to retrieve ssr entries from"
    )
    parser.add_argument("filter", nargs="?", default=None, help="String to filter results by")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse ``argv`` (default: the process arguments) into a Cli."""
    namespace = build_parser().parse_args(argv)
    return Cli(
        target_environment=list(namespace.target_environment),
        url=namespace.url,
        filter=namespace.filter,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    cli = parse_args(argv)
    try:
        results = (
            SsrRetriever(cli.url)
            .add_targets(cli.get_targets())
            .get()
            .set_pattern(cli.filter)
            .consolidate()
        )
    except SsrError as exc:
        print(exc, file=sys.stderr)
        return 1
    for result in results:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
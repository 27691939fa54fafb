"""Command-line interface — list the catalog or print a repository path."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from gpm.domain.exceptions import (
    AmbiguousRepositoryError,
    ConfigurationError,
    RepositoryNotFoundError,
)
from gpm.infrastructure.config import Settings, get_settings
from gpm.services.catalog import Catalog
from gpm.services.walker import Walker

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpm",
        description="List and navigate the repositories under a workspace root.",
    )
    parser.add_argument("--root", help="workspace root (default: $GPM_WORKSPACE_ROOT or $GOPATH/src)")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="list every repository")

    source = sub.add_parser("source", help="hosting sources")
    source.add_argument("action", choices=["list"])

    owner = sub.add_parser("owner", help="owners / organisations")
    owner.add_argument("action", choices=["list"])
    owner.add_argument("--source")

    repo = sub.add_parser("repo", help="repositories")
    repo.add_argument("action", choices=["list"])
    repo.add_argument("--source")
    repo.add_argument("--owner")

    goto = sub.add_parser("goto", help="print the path of a repository")
    goto.add_argument("name", help="repo, owner/repo or source/owner/repo")

    sub.add_parser("serve", help="run the HTTP browse API")
    return parser


def print_result(catalog: Catalog, out: TextIO, source: str | None = None, owner: str | None = None) -> None:
    """Print ``index:  repo<TAB>owner<TAB>source`` for each repository."""
    for i, repo in enumerate(catalog.repositories(source=source, owner=owner)):
        out.write(f"{i}:  {repo.name}\t{repo.owner}\t{repo.source}\n")


def run(argv: Sequence[str] | None = None, settings: Settings | None = None, out: TextIO | None = None) -> int:
    """Parse *argv*, scan the workspace and execute the command."""
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    out = out or sys.stdout

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    try:
        root = args.root or settings.resolve_root()
        catalog = Walker(max_repos=settings.max_repos).walk(root)
    except ConfigurationError as exc:
        print(f"gpm: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    if args.command == "serve":
        from gpm.main import serve

        serve(catalog, settings, log_level=args.log_level)
    elif args.command == "source":
        for name in sorted(catalog.sources()):
            out.write(f"{name}\n")
    elif args.command == "owner":
        for name in sorted(catalog.owners(source=args.source)):
            out.write(f"{name}\n")
    elif args.command == "repo":
        print_result(catalog, out, source=args.source, owner=args.owner)
    elif args.command == "goto":
        try:
            repo = catalog.resolve(args.name)
        except (RepositoryNotFoundError, AmbiguousRepositoryError) as exc:
            print(f"gpm: {exc}", file=sys.stderr)
            return EXIT_NOT_FOUND
        out.write(f"{repo.path}\n")
    else:
        print_result(catalog, out)
    return EXIT_OK

"""Command line interface for checking links in Markdown documents."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, TypeVar

import click
from termcolor import colored

from .analyzer import BrokenLink, LinkAnalyzer, LinkStatistics

_T = TypeVar("_T")


def _paint(text: str, color: str | None = None, *, bold: bool = True, underline: bool = False) -> str:
    attrs = []
    if bold:
        attrs.append("bold")
    if underline:
        attrs.append("underline")
    return colored(text, color, attrs=attrs or None)


def _relative(file_path: Path, base: Path) -> str:
    try:
        return str(file_path.relative_to(base))
    except ValueError:
        return str(file_path)


def _analyze(path: Path) -> LinkAnalyzer:
    analyzer = LinkAnalyzer(path)
    analyzer.analyze_directory()
    return analyzer


def check_links(path: str | Path, verbose: bool = False) -> list[BrokenLink]:
    """Print a report of broken links under ``path`` and return them."""
    path = Path(path)
    broken = _analyze(path).find_broken_links()

    if not broken:
        print(f"{_paint('✓', 'green')} No broken links found!")
        return broken

    print(f"{_paint('✗', 'red')} Found {len(broken)} broken links:")
    for item in broken:
        link = item.link
        print()
        print(f"  {_paint('File:', 'yellow')} {_relative(link.file_path, path)}:{link.line_number}")
        print(f"  {_paint('Link:', 'cyan')} {link.text}")
        print(f"  {_paint('Target:', 'magenta')} {link.target}")
        print(f"  {_paint('Reason:', 'red')} {item.reason}")
        if verbose:
            print(f"  {_paint('Markdown:', 'blue')} [{link.text}]({link.target})")
    return broken


def _percent(part: int, total: int) -> int:
    return part * 100 // total if total > 0 else 0


def _print_text_statistics(stats: LinkStatistics) -> None:
    print(_paint("Document Link Statistics", underline=True))
    print()
    print(f"{_paint('Total Documents:', 'cyan')} {stats.total_documents}")
    print(f"{_paint('Total Links:', 'cyan')} {stats.total_links}")
    print(
        f"{_paint('Internal Links:', 'green')} {stats.internal_links} "
        f"({_percent(stats.internal_links, stats.total_links)}%)"
    )
    print(
        f"{_paint('External Links:', 'blue')} {stats.external_links} "
        f"({_percent(stats.external_links, stats.total_links)}%)"
    )

    broken_color = "red" if stats.broken_links > 0 else "green"
    print(f"{_paint('Broken Links:', broken_color)} {stats.broken_links}")

    orphan_color = "yellow" if stats.orphaned_documents > 0 else "green"
    print(f"{_paint('Orphaned Documents:', orphan_color)} {stats.orphaned_documents}")

    if stats.document_stats:
        print()
        print(_paint("Per-Document Statistics:", underline=True))
        for doc_path, doc in stats.document_stats.items():
            name = doc_path.name or "unknown"
            print(
                f"  {_paint(name, 'magenta')} {doc.total_links} links "
                f"({doc.internal_links} internal, {doc.external_links} external)"
            )


def show_statistics(path: str | Path, output_format: str = "text") -> LinkStatistics:
    """Print link statistics for ``path`` as text or JSON and return them."""
    stats = _analyze(Path(path)).get_statistics()
    if output_format == "json":
        print(json.dumps(stats.to_dict(), indent=2))
    else:
        _print_text_statistics(stats)
    return stats


def find_orphans(path: str | Path) -> list[Path]:
    """Print the documents nothing links to and return them."""
    path = Path(path)
    orphaned = _analyze(path).find_orphaned_documents()

    if not orphaned:
        print(f"{_paint('✓', 'green')} No orphaned documents found!")
        return orphaned

    print(f"{_paint('⚠', 'yellow')} Found {len(orphaned)} orphaned documents:")
    for doc in orphaned:
        print(f"  {colored(_relative(doc, path), 'red')}")
    return orphaned


def _guarded(action: Callable[[], _T]) -> _T:
    try:
        return action()
    except (OSError, ValueError) as err:
        print(f"{_paint('Error:', 'red')} {err}", file=sys.stderr)
        sys.exit(1)


_PATH_OPTION = click.option(
    "-p",
    "--path",
    type=click.Path(path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to analyze",
)


_cli = click.Group(
    name="doclink-checker",
    help="A tool to analyze markdown documents for broken links and statistics",
)
click.version_option(version="0.1.0", prog_name="doclink-checker")(_cli)


@_cli.command("check", help="Check for broken links in markdown documents")
@_PATH_OPTION
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
def _check(path: Path, verbose: bool) -> None:
    if _guarded(lambda: check_links(path, verbose)):
        sys.exit(1)


@_cli.command("stats", help="Show statistics about links in markdown documents")
@_PATH_OPTION
@click.option("-f", "--format", "output_format", default="text", show_default=True, help="Output format (text or json)")
def _stats(path: Path, output_format: str) -> None:
    _guarded(lambda: show_statistics(path, output_format))


@_cli.command("orphans", help="Find orphaned documents (not linked from anywhere)")
@_PATH_OPTION
def _orphans(path: Path) -> None:
    _guarded(lambda: find_orphans(path))


def main(argv: list[str] | None = None) -> None:
    """Run the command line tool; always ends with SystemExit."""
    _cli.main(args=argv, prog_name="doclink-checker")


if __name__ == "__main__":
    main()
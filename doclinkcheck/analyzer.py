"""Extraction and analysis of links between Markdown documents."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

_EXTERNAL_PREFIXES = ("http://", "https://")

_REFERENCE_DEF_RE = re.compile(r"^\[([^\]]+)\]:\s*(.+)$")
_INLINE_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_REFERENCE_LINK_RE = re.compile(r"\[([^\]]+)\]\[([^\]]*)\]")


@dataclass(frozen=True)
class MarkdownLink:
    """A link found in a Markdown document."""

    text: str
    target: str
    line_number: int
    file_path: Path


@dataclass(frozen=True)
class BrokenLink:
    """A link whose target could not be found, with the reason."""

    link: MarkdownLink
    reason: str


@dataclass
class DocumentStats:
    """Link counts for a single document."""

    total_links: int = 0
    internal_links: int = 0
    external_links: int = 0


@dataclass
class LinkStatistics:
    """Link counts for a whole document tree."""

    total_documents: int = 0
    total_links: int = 0
    internal_links: int = 0
    external_links: int = 0
    broken_links: int = 0
    orphaned_documents: int = 0
    document_stats: dict[Path, DocumentStats] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping of these statistics."""
        return {
            "total_documents": self.total_documents,
            "total_links": self.total_links,
            "internal_links": self.internal_links,
            "external_links": self.external_links,
            "broken_links": self.broken_links,
            "orphaned_documents": self.orphaned_documents,
            "document_stats": {
                str(path): {
                    "total_links": doc.total_links,
                    "internal_links": doc.internal_links,
                    "external_links": doc.external_links,
                }
                for path, doc in self.document_stats.items()
            },
        }


def is_external(target: str) -> bool:
    """Tell whether a link target points to an HTTP(S) resource."""
    return target.startswith(_EXTERNAL_PREFIXES)


def _lines(content: str) -> list[str]:
    """Split text into lines on '\\n', dropping a '\\r' before it."""
    if not content:
        return []
    parts = content.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


def extract_links(content: str) -> list[tuple[str, str, int]]:
    """Return (text, target, line number) for every inline and resolved reference link."""
    lines = _lines(content)

    definitions: dict[str, str] = {}
    for line in lines:
        match = _REFERENCE_DEF_RE.match(line)
        if match:
            definitions[match.group(1).lower()] = match.group(2).strip()

    links: list[tuple[str, str, int]] = []
    for line_number, line in enumerate(lines, start=1):
        for match in _INLINE_LINK_RE.finditer(line):
            links.append((match.group(1), match.group(2), line_number))

        for match in _REFERENCE_LINK_RE.finditer(line):
            text, label = match.group(1), match.group(2)
            key = (label or text).lower()
            url = definitions.get(key)
            if url is not None:
                links.append((text, url, line_number))

    return links


def _canonical(path: Path) -> Path | None:
    try:
        return path.resolve(strict=True)
    except (OSError, ValueError, RuntimeError):
        return None


def _walk(directory: Path) -> Iterator[Path]:
    """Yield the files below a directory, sorted, without following linked directories."""
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    subdirectories = []
    for entry in entries:
        if entry.is_dir():
            if not entry.is_symlink():
                subdirectories.append(Path(entry.path))
        else:
            yield Path(entry.path)
    for subdirectory in subdirectories:
        yield from _walk(subdirectory)


class LinkAnalyzer:
    """Collects the links of all Markdown files below a base directory."""

    def __init__(self, base_path: str | os.PathLike[str]) -> None:
        self.base_path = Path(base_path)
        self.documents: dict[Path, list[MarkdownLink]] = {}

    def _files(self) -> Iterator[Path]:
        root = self.base_path
        if not root.is_dir():
            if not root.exists():
                raise FileNotFoundError(f"No such file or directory: {root}")
            yield root
            return
        yield from _walk(root)

    def analyze_directory(self) -> None:
        """Read every '.md' file under the base path and record its links."""
        for path in self._files():
            if path.suffix != ".md":
                continue
            content = path.read_text(encoding="utf-8")
            self.documents[path] = [
                MarkdownLink(text, target, line_number, path)
                for text, target, line_number in extract_links(content)
            ]

    def _resolve(self, file_path: Path, target: str) -> Path:
        if target.startswith("/"):
            return self.base_path / target[1:]
        return file_path.parent / target

    def _internal_links(self) -> Iterator[tuple[Path, MarkdownLink]]:
        for file_path, links in self.documents.items():
            for link in links:
                if not is_external(link.target):
                    yield file_path, link

    def find_broken_links(self) -> list[BrokenLink]:
        """Return the internal links whose target does not exist."""
        broken = []
        for file_path, link in self._internal_links():
            resolved = self._resolve(file_path, link.target)
            resolved = _canonical(resolved) or resolved
            try:
                exists = resolved.exists()
            except (OSError, ValueError):
                exists = False
            if not exists:
                broken.append(BrokenLink(link, f"File not found: {resolved}"))
        return broken

    def find_orphaned_documents(self) -> list[Path]:
        """Return the documents that no other document links to."""
        referenced = {
            self.base_path / "README.md",
            self.base_path / "readme.md",
        }
        for file_path, link in self._internal_links():
            canonical = _canonical(self._resolve(file_path, link.target))
            if canonical is not None:
                referenced.add(canonical)

        orphaned = []
        for doc_path in self.documents:
            canonical = _canonical(doc_path)
            if canonical is not None and canonical not in referenced:
                orphaned.append(doc_path)
        return orphaned

    def get_statistics(self) -> LinkStatistics:
        """Summarise link counts, broken links and orphans."""
        stats = LinkStatistics(total_documents=len(self.documents))
        for doc_path, links in self.documents.items():
            external = sum(1 for link in links if is_external(link.target))
            internal = len(links) - external
            stats.total_links += len(links)
            stats.external_links += external
            stats.internal_links += internal
            stats.document_stats[doc_path] = DocumentStats(
                total_links=len(links),
                internal_links=internal,
                external_links=external,
            )
        stats.broken_links = len(self.find_broken_links())
        stats.orphaned_documents = len(self.find_orphaned_documents())
        return stats
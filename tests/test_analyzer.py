import json
from pathlib import Path

import pytest

from doclinkcheck.analyzer import (
    DocumentStats,
    LinkAnalyzer,
    LinkStatistics,
    extract_links,
    is_external,
)


def _write(path: Path, *lines: str) -> Path:
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def base(tmp_path: Path) -> Path:
    return tmp_path.resolve()


def _analyzed(base: Path) -> LinkAnalyzer:
    analyzer = LinkAnalyzer(base)
    analyzer.analyze_directory()
    return analyzer


def test_extract_inline_links():
    links = extract_links("Check out [Rust](https://www.rust-lang.org) for more info.")
    assert links == [("Rust", "https://www.rust-lang.org", 1)]


def test_extract_reference_links():
    content = "Check out [Rust][rust-lang] for more info.\n\n[rust-lang]: https://www.rust-lang.org"
    links = extract_links(content)
    assert links == [("Rust", "https://www.rust-lang.org", 1)]


def test_extract_relative_links():
    links = extract_links("See [documentation](./docs/README.md) for details.")
    assert links == [("documentation", "./docs/README.md", 1)]


def test_extract_multiple_links_with_line_numbers():
    content = "First [link1](url1)\n\nSecond [link2](url2)\nThird [link3](url3)"
    links = extract_links(content)
    assert len(links) == 3
    assert [link[2] for link in links] == [1, 3, 4]


def test_extract_collapsed_reference_uses_text_case_insensitively():
    content = "Read [Guide][] now.\n[guide]:   docs/guide.md  "
    assert extract_links(content) == [("Guide", "docs/guide.md", 1)]


def test_extract_unknown_reference_is_dropped():
    assert extract_links("See [x][missing].") == []


def test_extract_inline_before_reference_on_same_line():
    content = "[a][r] and [b](b.md)\n[r]: r.md"
    assert extract_links(content) == [("b", "b.md", 1), ("a", "r.md", 1)]


def test_extract_handles_crlf_line_endings():
    content = "one\r\n[x](y.md)\r\n"
    assert extract_links(content) == [("x", "y.md", 2)]


def test_extract_empty_content():
    assert extract_links("") == []


@pytest.mark.parametrize(
    "target, expected",
    [
        ("http://a", True),
        ("https://a", True),
        ("./doc.md", False),
        ("ftp://a", False),
        ("/abs.md", False),
    ],
)
def test_is_external(target, expected):
    assert is_external(target) is expected


def test_find_broken_links(base):
    _write(base / "doc1.md", "# Document 1", "[Valid link](./doc2.md)", "[Broken link](./nonexistent.md)")
    _write(base / "doc2.md", "# Document 2")

    broken = _analyzed(base).find_broken_links()
    assert len(broken) == 1
    assert broken[0].link.text == "Broken link"
    assert broken[0].link.target == "./nonexistent.md"
    assert broken[0].link.line_number == 3
    assert broken[0].reason.startswith("File not found: ")


def test_broken_links_in_subdirectories(base):
    (base / "docs").mkdir()
    _write(base / "README.md", "[Link to docs](./docs/guide.md)", "[Broken link](./docs/missing.md)")
    _write(base / "docs" / "guide.md", "# Guide")

    broken = _analyzed(base).find_broken_links()
    assert len(broken) == 1
    assert broken[0].link.target == "./docs/missing.md"


def test_root_relative_target_resolves_from_base(base):
    (base / "sub").mkdir()
    _write(base / "target.md", "# Target")
    _write(base / "sub" / "page.md", "[up](/target.md)", "[gone](/absent.md)")

    broken = _analyzed(base).find_broken_links()
    assert [b.link.target for b in broken] == ["/absent.md"]


def test_external_links_never_broken(base):
    _write(base / "doc.md", "[site](https://example.com/nothing-here)")
    assert _analyzed(base).find_broken_links() == []


def test_find_orphaned_documents(base):
    _write(base / "README.md", "[Link to doc1](./doc1.md)")
    _write(base / "doc1.md", "[Link to doc2](./doc2.md)")
    _write(base / "doc2.md", "# Doc 2")
    _write(base / "orphaned.md", "# Orphaned Document")

    orphaned = _analyzed(base).find_orphaned_documents()
    assert len(orphaned) == 1
    assert orphaned[0].name == "orphaned.md"


def test_readme_not_orphaned(base):
    _write(base / "README.md", "# Main README")
    assert _analyzed(base).find_orphaned_documents() == []


def test_analyze_directory_ignores_other_files(base):
    _write(base / "notes.txt", "[x](y.md)")
    _write(base / "doc.md", "[x](notes.txt)")
    analyzer = _analyzed(base)
    assert list(analyzer.documents) == [base / "doc.md"]
    assert analyzer.find_broken_links() == []


def test_analyze_missing_directory_raises(base):
    analyzer = LinkAnalyzer(base / "does-not-exist")
    with pytest.raises(FileNotFoundError):
        analyzer.analyze_directory()


def test_get_statistics(base):
    _write(base / "doc1.md", "[Internal link](./doc2.md)", "[External link](https://example.com)")
    _write(base / "doc2.md", "[Another internal](./doc1.md)", "[Broken link](./missing.md)")
    _write(base / "orphaned.md", "# Orphaned")

    stats = _analyzed(base).get_statistics()

    assert stats.total_documents == 3
    assert stats.total_links == 4
    assert stats.internal_links == 3
    assert stats.external_links == 1
    assert stats.broken_links == 1
    assert stats.orphaned_documents == 1
    assert len(stats.document_stats) == 3
    assert stats.document_stats[base / "doc1.md"] == DocumentStats(2, 1, 1)


def test_statistics_to_dict_is_json_ready(base):
    _write(base / "doc1.md", "[Internal link](./doc2.md)", "[External link](https://example.com)")
    _write(base / "doc2.md", "# Two")

    stats = _analyzed(base).get_statistics()
    data = json.loads(json.dumps(stats.to_dict()))

    assert data["total_links"] == stats.total_links
    assert data["document_stats"][str(base / "doc1.md")] == {
        "total_links": 2,
        "internal_links": 1,
        "external_links": 1,
    }


def test_empty_statistics_to_dict():
    data = LinkStatistics().to_dict()
    assert data["document_stats"] == {}
    assert data["total_documents"] == 0
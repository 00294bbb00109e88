# doclinkcheck

doclinkcheck scans a directory tree of Markdown files. It reports:

- links whose target does not exist
- documents that no other document links to
- counts of internal and external links

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

The `doclinkcheck` command has three subcommands: `check`, `stats` and
`orphans`. Each one takes `--path`/`-p`, the directory to analyze, which
defaults to the current directory. If `--path` names a single file instead of a
directory, that file alone is analyzed. `doclinkcheck --version` prints the
version.

If the path cannot be read, an `Error:` line goes to standard error and the
command exits with status 1. A path that does not exist counts as unreadable.

### Check for broken links

```
doclinkcheck check --path docs
doclinkcheck check -p docs --verbose
```

For each broken link the command prints:

- the file, relative to the analyzed path, with the line number
- the link text
- the target
- the reason

`--verbose`/`-v` also prints the link as Markdown. The command exits with status
1 if any link is broken.

Link targets resolve as follows:

- A target that starts with `http://` or `https://` is external and is not checked.
- A target that starts with `/` resolves against the analyzed directory.
- Any other target resolves against the directory of the file that holds the link.

### Link statistics

```
doclinkcheck stats --path docs
doclinkcheck stats --path docs --format json
```

The report contains:

- the number of documents
- the total number of links
- the internal and external links, with whole-number percentages
- the number of broken links
- the number of orphaned documents
- a line per document with its link counts

`--format json` (or `-f json`) prints the same figures as indented JSON. Its
keys are `total_documents`, `total_links`, `internal_links`, `external_links`,
`broken_links`, `orphaned_documents` and `document_stats`. `document_stats` is
keyed by document path. Any other format value gives the text report.

### Orphaned documents

```
doclinkcheck orphans --path docs
```

This lists the Markdown files that no link resolves to, relative to the analyzed
path.

`README.md` and `readme.md` directly inside the analyzed directory are always
treated as linked. That exemption is matched against fully resolved paths, so it
applies only when `--path` is given as an absolute path without symbolic links.
With a relative path, an unlinked README is reported like any other file.

## Library use

The module `doclinkcheck.analyzer` does the analysis:

```python
from doclinkcheck.analyzer import LinkAnalyzer, extract_links, is_external

analyzer = LinkAnalyzer("docs")
analyzer.analyze_directory()

for broken in analyzer.find_broken_links():
    print(broken.link.file_path, broken.link.line_number, broken.reason)

print(analyzer.find_orphaned_documents())
print(analyzer.get_statistics().to_dict())

extract_links("See [guide](./guide.md).")   # [('guide', './guide.md', 1)]
is_external("https://example.com")          # True
```

What `LinkAnalyzer` does:

- `analyze_directory()` reads every `.md` file under the base path as UTF-8.
  Subdirectories are visited in name order; symbolic links to directories are
  not followed.
- The links of each file are kept in `analyzer.documents`, a dict from file path
  to a list of `MarkdownLink`.
- `find_broken_links()` returns `BrokenLink` objects, each holding the `link` and
  a `reason`.
- `find_orphaned_documents()` returns a list of paths.
- `get_statistics()` returns a `LinkStatistics`. Its `document_stats` maps each
  path to a `DocumentStats`.

`MarkdownLink` has four fields: `text`, `target`, `line_number` and `file_path`.

`extract_links` recognizes two kinds of link:

- Inline links: `[text](target)`.
- Reference links: `[text][label]` and `[text][]`. Their definitions are lines
  of the form `[label]: target`. Labels match without regard to case. A
  reference link with no matching definition is ignored.

It returns `(text, target, line_number)` tuples, with line numbers counted from 1.

The command line is also available as `doclinkcheck.cli.main(argv)`. The
functions `check_links`, `show_statistics` and `find_orphans` in that module each
print their report and return what they found.

## Limits

Only the local file system is checked. External links are counted but never
fetched. Anchors (`#section`) and query strings in targets are not interpreted:
they are treated as part of the file name.
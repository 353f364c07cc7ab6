"""Command line tasks over Wiktionary, Wikipedia and Wikidata dumps."""

from __future__ import annotations

import argparse
import json
import re
import sys
from collections import Counter
from collections.abc import Iterator, Sequence
from contextlib import ExitStack
from enum import Enum
from pathlib import Path
from typing import Any, Optional, TextIO

from .comments import clean_comments
from .header_tree import parse_indented_tree, print_tree
from .headers import count_level_left, trim_header
from .index import Index
from .markup import Template
from .markup_parser import TemplateParser
from .pages import PageXml, PageXmlError
from .progress import Progress
from .structs import LimitedListMap
from .templates import extract_templates, extract_templates_from_file
from .textutils import PathLike, read_lines, save_to_file, split, split_lines, trim
from .wikidata import search
from .wikifile import WikiFile
from .wikiname import WikiName

PAGES_DIR = Path("../pages")
WORK_DIR = Path("../work")
DUMP_ROOT = Path("../dump")
WIKTIONARY_LANGS = ("pl", "en", "fr", "eo")

WIKIDATA_INCLUDE = ('"P220"', '"Q82042"', '"Q8162"', '"Q34770"')
WIKIDATA_EXCLUDE = ('"Q5"',)

_TITLE_DUMP_PATTERN = re.compile(r"(.*)wiktionary.*.txt.bz2")
_CLAIM_ID_KEYS = ("mainsnak", "datavalue", "value", "id")
_MISSING = object()


class PropType(Enum):
    """Kind of a wikidata entity; the value is the stem of its output file."""

    ISO = "iso"
    GLOTTOLOG = "glottolog"
    GOST = "gost"
    LANG = "lang"
    POS = "pos"
    OTHER = "other"
    PRONUN = "pronun"
    LING = "ling"
    LING_NORM = "lingnorm"


def correct_filename(name: str) -> str:
    """Make a page title usable as a file name."""
    return name.replace("/", "_")


def _lookup(data: Any, keys: Sequence[str]) -> Any:
    current = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def get_nested(data: Any, keys: Sequence[str]) -> Any:
    """Follow ``keys`` through nested objects; None when a key is missing."""
    found = _lookup(data, keys)
    return None if found is _MISSING else found


def _claim_ids(claims: Any) -> Iterator[str]:
    if isinstance(claims, list):
        items: Any = claims
    else:
        print("not an array")
        items = claims.values() if isinstance(claims, dict) else ()
    for item in items:
        value = _lookup(item, _CLAIM_ID_KEYS)
        if isinstance(value, str):
            yield value


def prop_type(data: Any) -> PropType:
    """Classify a wikidata entity by the claims it carries."""
    if _lookup(data, ("claims", "P220")) is not _MISSING:
        return PropType.ISO
    if _lookup(data, ("claims", "P1394")) is not _MISSING:
        return PropType.GLOTTOLOG
    if _lookup(data, ("claims", "P278")) is not _MISSING:
        return PropType.GOST

    instance_of = _lookup(data, ("claims", "P31"))
    if instance_of is not _MISSING:
        for code in _claim_ids(instance_of):
            if code == "Q82042":
                return PropType.POS
            if code == "Q34770":
                return PropType.LANG

    part_of = _lookup(data, ("claims", "P361"))
    if part_of is not _MISSING:
        for code in _claim_ids(part_of):
            if code == "Q34770":
                return PropType.PRONUN

    subclass_of = _lookup(data, ("claims", "P279"))
    if subclass_of is not _MISSING:
        for code in _claim_ids(subclass_of):
            if code == "Q8162":
                return PropType.LING
            if code == "Q1759988":
                return PropType.LING_NORM
    return PropType.OTHER


def _extract_terms(wiki_name: WikiName, terms_file: Path, directory: Path) -> list[str]:
    index = Index(wiki_name)
    index.read_index()
    saved: list[str] = []
    with WikiFile(index) as wiki_file:
        for term in read_lines(terms_file):
            try:
                value = wiki_file.extract_term(term)
            except PageXmlError as exc:
                print(exc, file=sys.stderr)
                value = ""
            if value:
                save_to_file(value, directory / f"{correct_filename(term)}.page")
                print(f"{term} ok")
                saved.append(term)
            else:
                print(f"{term} failed")
    return saved


def create_pages(
    pages_dir: PathLike = PAGES_DIR,
    work_dir: PathLike = WORK_DIR,
    dump_root: PathLike = DUMP_ROOT,
) -> dict[str, list[str]]:
    """Save the Wiktionary pages listed in the term files, one file per page.

    Returns the terms saved for each language.
    """
    pages = Path(pages_dir)
    pages.mkdir(exist_ok=True)
    saved: dict[str, list[str]] = {}
    for lang in WIKTIONARY_LANGS:
        directory = pages / lang
        directory.mkdir(exist_ok=True)
        wiki_name = WikiName(dump_root=Path(dump_root))
        wiki_name.wikt_name(lang)
        terms_file = Path(work_dir) / f"terms_to_extract.{lang}.txt"
        saved[lang] = _extract_terms(wiki_name, terms_file, directory)
    return saved


def process_page_to_tree(input_path: PathLike, output_path: PathLike) -> bool:
    """Write the header tree of a page file; False when it cannot be read."""
    try:
        handle = open(input_path, encoding="utf-8")
    except OSError:
        print(f"can't open {input_path}", file=sys.stderr)
        return False
    with handle:
        root = parse_indented_tree(handle)
    with open(output_path, "w", encoding="utf-8") as out:
        print_tree(root, out)
    return True


def _files_with_suffix(directory: Path, suffix: str) -> list[Path]:
    return sorted(path for path in directory.rglob("*") if path.is_file() and path.suffix == suffix)


def create_tree_for_pages(pages_dir: PathLike = PAGES_DIR) -> list[Path]:
    """Write a ``.tree`` file beside every ``.page`` file; return the trees written."""
    root = Path(pages_dir)
    if not root.is_dir():
        print(f"is not directory: {root}", file=sys.stderr)
        return []
    written: list[Path] = []
    for page in _files_with_suffix(root, ".page"):
        tree = page.with_suffix(".tree")
        print(tree)
        if process_page_to_tree(page, tree):
            written.append(tree)
    return written


def create_pages_wiki(
    pages_dir: PathLike = PAGES_DIR,
    work_dir: PathLike = WORK_DIR,
    dump_root: PathLike = DUMP_ROOT,
) -> list[str]:
    """Save the English Wikipedia pages listed in the term file; return the saved terms."""
    directory = Path(pages_dir) / "enwiki"
    directory.mkdir(parents=True, exist_ok=True)
    wiki_name = WikiName(dump_root=Path(dump_root))
    wiki_name.wiki_name("en")
    return _extract_terms(wiki_name, Path(work_dir) / "terms_to_extract.enwiki.txt", directory)


def search_wikidata_wikt_needed(output_file: PathLike = "wiktNeeded.jsonl") -> int:
    """Collect the wikidata entities about languages and linguistics."""
    return search(WIKIDATA_INCLUDE, WIKIDATA_EXCLUDE, output_file)


def show_title_types(dump_dir: PathLike = DUMP_ROOT, output_dir: PathLike = "titles") -> list[str]:
    """Write, per Wiktionary language, the titles holding ``/`` or ``:`` and their parts.

    English is skipped. Returns the languages processed.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(exist_ok=True)
    processed: list[str] = []
    for entry in sorted(Path(dump_dir).rglob("*")):
        if not entry.is_file():
            continue
        match = _TITLE_DUMP_PATTERN.fullmatch(entry.name)
        if match is None:
            continue
        lang = match.group(1)
        if lang == "en":
            continue
        print(lang)
        wiki_name = WikiName(dump_root=Path(dump_dir))
        wiki_name.wikt_name(lang)
        index = Index(wiki_name)
        index.read_index()
        parts_by_key: dict[str, set[str]] = {}
        all_titles: set[str] = set()
        for title in index.object_map:
            if "/" in title:
                marker, separator = "s", "/"
            elif ":" in title:
                marker, separator = "c", ":"
            else:
                continue
            all_titles.add(title)
            parts = split(title, separator)
            for number, part in enumerate(parts):
                parts_by_key.setdefault(f"{marker}{number}_{len(parts)}", set()).add(part)
        save_to_file(sorted(all_titles), out_dir / f"{lang}.all.txt")
        for key in sorted(parts_by_key):
            save_to_file(sorted(parts_by_key[key]), out_dir / f"{lang}.{key}.txt")
        processed.append(lang)
    return processed


def remove_empty_lines_from_jsonl(filename: PathLike, out: Optional[TextIO] = None) -> None:
    """Copy the non-empty lines of a file to ``out`` (standard output by default)."""
    target = out if out is not None else sys.stdout
    with open(filename, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\n")
            if line:
                target.write(line + "\n")


def split_wikidata_result(
    input_file: PathLike = "wiktNeeded.jsonl", output_dir: PathLike = "."
) -> Counter:
    """Sort the entities of a JSON-lines file into one file per ``PropType``.

    Returns how many entities went to each kind.
    """
    directory = Path(output_dir)
    counts: Counter = Counter()
    with ExitStack() as stack:
        source = stack.enter_context(open(input_file, encoding="utf-8"))
        targets = {
            kind: stack.enter_context(open(directory / f"{kind.value}.jsonl", "w", encoding="utf-8"))
            for kind in PropType
        }
        total = 0
        for raw in source:
            line = raw.rstrip("\n")
            if not line:
                continue
            kind = prop_type(json.loads(line))
            targets[kind].write(line + "\n")
            counts[kind] += 1
            total += 1
            if total % 200 == 0:
                print(total, flush=True)
    return counts


def page_templates(
    pages_dir: PathLike = PAGES_DIR, out: Optional[TextIO] = None
) -> list[tuple[Path, list[str]]]:
    """Extract the template calls of every ``.page`` file, naming each file on ``out``."""
    target = out if out is not None else sys.stdout
    found: list[tuple[Path, list[str]]] = []
    for path in _files_with_suffix(Path(pages_dir), ".page"):
        target.write(f"{path}\n")
        found.append((path, extract_templates_from_file(path)))
    return found


def _parse_template(text: str) -> Template:
    template = TemplateParser(text, 0).parse()
    if template is None:
        raise ValueError(f"not a template call: {text!r}")
    return template


def _stream_pages(wiki_name: WikiName, step_len: float = 0.01) -> Iterator[tuple[str, str]]:
    index = Index(wiki_name)
    pages = PageXml()
    with WikiFile(index) as wiki_file, index:
        progress = Progress(wiki_file.size, step_len)
        while (chunk := index.get_chunk()) is not None:
            text = wiki_file.decompress_index_chunk(chunk)
            progress.update(wiki_file.file_pos())
            try:
                objects = pages.all_from_chunk(text)
            except PageXmlError as exc:
                print(exc, file=sys.stderr)
                continue
            yield from objects


def wikipedia_infoboxes(
    dump_root: PathLike = DUMP_ROOT, output_file: PathLike = "infoboxes.txt"
) -> int:
    """Write every ``Infobox language`` call of English Wikipedia; return how many."""
    wiki_name = WikiName(dump_root=Path(dump_root))
    wiki_name.wiki_name("en")
    found = 0
    with open(output_file, "w", encoding="utf-8") as out:
        for _, text in _stream_pages(wiki_name, 0.001):
            for call in extract_templates(clean_comments(text)):
                if trim(_parse_template(call).name) == "Infobox language":
                    out.write(f"{call}\n\n")
                    found += 1
    return found


def pages_infoboxes(pages_dir: PathLike = PAGES_DIR, out: Optional[TextIO] = None) -> list[Template]:
    """Parse the templates of every ``.page1`` file and show each parse."""
    target = out if out is not None else sys.stdout
    parsed: list[Template] = []
    for path in _files_with_suffix(Path(pages_dir), ".page1"):
        for call in extract_templates_from_file(path):
            target.write(f"parse: {call}\n")
            target.flush()
            template = _parse_template(call)
            target.write(template.dump() + "\n")
            parsed.append(template)
    return parsed


def search_for_comments(lang: str, dump_root: PathLike = DUMP_ROOT, out: Optional[TextIO] = None) -> int:
    """Show the lines of a Wiktionary that still hold ``<!--``; return how many."""
    target = out if out is not None else sys.stdout
    wiki_name = WikiName(dump_root=Path(dump_root))
    wiki_name.wikt_name(lang)
    found = 0
    for title, text in _stream_pages(wiki_name):
        for line in split_lines(text):
            trimmed = trim(line)
            if "<!--" in trimmed:
                target.write(f"{title} : {trimmed}\n")
                found += 1
    return found


def collect_all_headers(
    dump_root: PathLike = DUMP_ROOT, output_file: PathLike = "allHeadersWhere.txt"
) -> LimitedListMap:
    """Write every header of English Wiktionary with a few pages using it."""
    wiki_name = WikiName(dump_root=Path(dump_root))
    wiki_name.wikt_name("en")
    headers: LimitedListMap = LimitedListMap()
    for title, text in _stream_pages(wiki_name):
        for line in split_lines(text):
            if count_level_left(line) > 1:
                headers.add(trim_header(trim(line)), title)
    with open(output_file, "w", encoding="utf-8") as out:
        headers.write(out)
    return headers


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wiktparse", description="Work with wiki dumps.")
    commands = parser.add_subparsers(dest="command")

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        return commands.add_parser(name, help=help_text)

    cmd = add("pages", "save listed Wiktionary pages")
    cmd.add_argument("--pages-dir", default=PAGES_DIR)
    cmd.add_argument("--work-dir", default=WORK_DIR)
    cmd.add_argument("--dump-root", default=DUMP_ROOT)
    cmd.set_defaults(run=lambda a: create_pages(a.pages_dir, a.work_dir, a.dump_root))

    cmd = add("trees", "write header trees of saved pages")
    cmd.add_argument("--pages-dir", default=PAGES_DIR)
    cmd.set_defaults(run=lambda a: create_tree_for_pages(a.pages_dir))

    cmd = add("pages-wiki", "save listed Wikipedia pages")
    cmd.add_argument("--pages-dir", default=PAGES_DIR)
    cmd.add_argument("--work-dir", default=WORK_DIR)
    cmd.add_argument("--dump-root", default=DUMP_ROOT)
    cmd.set_defaults(run=lambda a: create_pages_wiki(a.pages_dir, a.work_dir, a.dump_root))

    cmd = add("wikidata-search", "collect language-related wikidata entities")
    cmd.add_argument("--output", default="wiktNeeded.jsonl")
    cmd.set_defaults(run=lambda a: search_wikidata_wikt_needed(a.output))

    cmd = add("title-types", "list title kinds per Wiktionary")
    cmd.add_argument("--dump-dir", default=DUMP_ROOT)
    cmd.add_argument("--output-dir", default="titles")
    cmd.set_defaults(run=lambda a: show_title_types(a.dump_dir, a.output_dir))

    cmd = add("remove-empty", "print the non-empty lines of a file")
    cmd.add_argument("filename")
    cmd.set_defaults(run=lambda a: remove_empty_lines_from_jsonl(a.filename))

    cmd = add("split-wikidata", "sort wikidata entities by kind")
    cmd.add_argument("--input", default="wiktNeeded.jsonl")
    cmd.add_argument("--output-dir", default=".")
    cmd.set_defaults(run=lambda a: split_wikidata_result(a.input, a.output_dir))

    cmd = add("templates", "extract templates of saved pages")
    cmd.add_argument("--pages-dir", default=PAGES_DIR)
    cmd.set_defaults(run=lambda a: page_templates(a.pages_dir))

    cmd = add("infoboxes", "collect Infobox language calls of Wikipedia")
    cmd.add_argument("--dump-root", default=DUMP_ROOT)
    cmd.add_argument("--output", default="infoboxes.txt")
    cmd.set_defaults(run=lambda a: wikipedia_infoboxes(a.dump_root, a.output))

    cmd = add("pages-infoboxes", "parse templates of .page1 files")
    cmd.add_argument("--pages-dir", default=PAGES_DIR)
    cmd.set_defaults(run=lambda a: pages_infoboxes(a.pages_dir))

    cmd = add("comments", "find lines with comments")
    cmd.add_argument("lang")
    cmd.add_argument("--dump-root", default=DUMP_ROOT)
    cmd.set_defaults(run=lambda a: search_for_comments(a.lang, a.dump_root))

    cmd = add("headers", "collect all headers of English Wiktionary")
    cmd.add_argument("--dump-root", default=DUMP_ROOT)
    cmd.add_argument("--output", default="allHeadersWhere.txt")
    cmd.set_defaults(run=lambda a: collect_all_headers(a.dump_root, a.output))
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one task; without a command the Wikipedia infoboxes are collected."""
    args = _build_parser().parse_args(argv)
    if args.command is None:
        wikipedia_infoboxes()
    else:
        args.run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
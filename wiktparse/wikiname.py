"""Locations of dump files and their multistream indexes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .textutils import PathLike, split, trim, trim_right

_MULTISTREAM = "multistream"
_WIKIDATA_PATTERN = re.compile(
    r"wikidatawiki-.*-pages-articles-multistream.*\.xml-p(\d+)p\d+\.bz2"
)
LIST_FILE = "list.txt"


class DumpLayoutError(RuntimeError):
    """The dump directory lacks a file the reader needs."""


def wiki_name_to_index_name(wiki_path: PathLike) -> str:
    """Return the path of the index that belongs to a multistream dump file.

    ``...-multistream.xml.bz2`` becomes ``...-multistream-index.txt.bz2``.
    Raises ValueError when the name does not look like a multistream dump.
    """
    path = Path(wiki_path)
    name = path.name
    pos = name.find(_MULTISTREAM)
    if pos == -1:
        raise ValueError("No 'multistream' in filename")
    cut = pos + len(_MULTISTREAM)
    index_name = name[:cut] + "-index" + name[cut:]
    dot = index_name.rfind(".xml")
    if dot == -1:
        raise ValueError("No extension .xml in filename")
    index_name = index_name[:dot] + ".txt" + index_name[dot + 4:]
    return str(path.parent / index_name)


def read_date(directory: PathLike) -> str:
    """Return the dump date stored in the first line of ``directory/DATE``."""
    try:
        with open(Path(directory) / "DATE", encoding="utf-8") as handle:
            first = handle.readline()
    except OSError as exc:
        raise DumpLayoutError(f"no DATE file in {directory}; download the dump first") from exc
    return trim(first.rstrip("\n"))


def wikidata_list(directory: PathLike) -> list[tuple[int, str]]:
    """List the wikidata dump parts under ``directory`` and write ``list.txt``.

    The parts are ordered by their first page number; each line of the list
    holds a three-digit ordinal and the file name.
    """
    root = Path(directory)
    found: list[tuple[int, str]] = []
    for entry in root.rglob("*"):
        if not entry.is_file():
            continue
        match = _WIKIDATA_PATTERN.fullmatch(entry.name)
        if match:
            found.append((int(match.group(1)), entry.name))
    found.sort(key=lambda item: item[0])
    with open(root / LIST_FILE, "w", encoding="utf-8") as out:
        for number, (_, filename) in enumerate(found):
            out.write(f"{number:03} {filename}\n")
    return found


@dataclass
class WikiName:
    """Paths of one dump file and its index, chosen by language or part."""

    dump_root: Path = Path("../dump")
    wikidata_dir: Path = Path("../dumpWD")
    index_path: str = ""
    wiki_path: str = ""
    symbolic_name: str = ""
    _parts: list[tuple[str, str]] = field(default_factory=list, init=False, repr=False)

    def _set_pair(self, directory: Path, stem: str) -> None:
        self.wiki_path = str(directory / f"{stem}-pages-articles-multistream.xml.bz2")
        self.index_path = str(directory / f"{stem}-pages-articles-multistream-index.txt.bz2")

    def wikt_name(self, lang: str) -> None:
        """Point at the Wiktionary dump of ``lang``."""
        directory = Path(self.dump_root) / "Wiktionary"
        self._set_pair(directory, f"{lang}wiktionary-{read_date(directory)}")

    def wiki_name(self, lang: str) -> None:
        """Point at the Wikipedia dump of ``lang``."""
        directory = Path(self.dump_root) / "Wikipedia"
        self._set_pair(directory, f"{lang}wiki-{read_date(directory)}")

    def _list_file(self) -> Path:
        directory = Path(self.wikidata_dir)
        list_file = directory / LIST_FILE
        if not list_file.exists():
            wikidata_list(directory)
        return list_file

    def init_all_wikidata(self) -> int:
        """Load the list of wikidata parts; return how many there are."""
        with open(self._list_file(), encoding="utf-8") as handle:
            lines = handle.read().splitlines()
        self._parts = []
        for line in lines:
            tokens = split(trim_right(line), " ")
            if not tokens:
                continue
            if len(tokens) < 2:
                raise DumpLayoutError(f"malformed line in {LIST_FILE}: {line!r}")
            self._parts.append((trim(tokens[0]), trim(tokens[1])))
        return len(self._parts)

    def close_all_wikidata(self) -> None:
        """Forget the loaded list of wikidata parts."""
        self._parts.clear()

    def set_wikidata_file(self, n: int) -> None:
        """Point at the ``n``-th wikidata part of the loaded list."""
        symbolic, filename = self._parts[n]
        self.symbolic_name = symbolic
        self.wiki_path = str(Path(self.wikidata_dir) / filename)
        self.index_path = wiki_name_to_index_name(self.wiki_path)

    def first_wikidata_file(self) -> None:
        """Point at the first wikidata part."""
        with open(self._list_file(), encoding="utf-8") as handle:
            line = handle.readline()
        if not line:
            raise DumpLayoutError(f"{LIST_FILE} is empty")
        tokens = split(trim(line.rstrip("\n")), " ")
        if len(tokens) < 2:
            raise DumpLayoutError(f"malformed line in {LIST_FILE}: {line!r}")
        directory = Path(self.wikidata_dir)
        self.wiki_path = str(directory / tokens[1])
        self.index_path = str(directory / wiki_name_to_index_name(tokens[1]))
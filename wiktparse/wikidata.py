"""Searching the wikidata dump parts for pages holding given strings."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .index import Index
from .pages import PageXml, PageXmlError
from .textutils import PathLike
from .wikifile import WikiFile
from .wikiname import WikiName


def find_substrings(text: str, include: Sequence[str], exclude: Sequence[str]) -> Optional[int]:
    """Return the position in ``include`` of the first string found in ``text``.

    None when nothing is found or when any string of ``exclude`` occurs.
    """
    if any(unwanted in text for unwanted in exclude):
        return None
    return next((number for number, wanted in enumerate(include) if wanted in text), None)


def first_chunk_wikidata(
    wiki_name: Optional[WikiName] = None, output_file: PathLike = "first_chunk"
) -> Optional[str]:
    """Write the text of the first page of the first wikidata part.

    Returns that page's title, or None when the first chunk holds none.
    """
    name = wiki_name if wiki_name is not None else WikiName()
    name.first_wikidata_file()
    index = Index(name)
    index.read_index()
    with WikiFile(index) as wiki_file, open(output_file, "w", encoding="utf-8") as out:
        pages = PageXml().all_from_chunk(wiki_file.decompress_chunk_by_index(0))
        if not pages:
            return None
        title, text = pages[0]
        print(title)
        out.write(text)
        return title


def search(
    include: Sequence[str],
    exclude: Sequence[str],
    output_file: PathLike,
    wiki_name: Optional[WikiName] = None,
) -> int:
    """Write every wikidata page matching ``include`` and not ``exclude``.

    Each matching page text goes on its own line; returns how many matched.
    """
    name = wiki_name if wiki_name is not None else WikiName()
    parts = name.init_all_wikidata()
    found_count = 0
    pages = PageXml()
    try:
        with open(output_file, "w", encoding="utf-8") as out:
            for part in range(parts):
                name.set_wikidata_file(part)
                print(f"{name.symbolic_name}  {name.wiki_path}")
                index = Index(name)
                index.read_index()
                one_percent = max(1, len(index) // 100)
                with WikiFile(index) as wiki_file:
                    for number in range(len(index)):
                        if number % one_percent == 0:
                            print(f"{number // one_percent}%")
                        chunk = wiki_file.decompress_chunk_by_index(number)
                        try:
                            objects = pages.all_from_chunk(chunk)
                        except PageXmlError as exc:
                            print(exc, file=sys.stderr)
                            continue
                        for title, text in objects:
                            which = find_substrings(text, include, exclude)
                            if which is not None:
                                found_count += 1
                                print(f"{title} {found_count} {which}")
                                out.write(text + "\n")
    finally:
        name.close_all_wikidata()
    return found_count
import bz2
from xml.sax.saxutils import escape

import pytest

from wiktparse.index import Index, IndexedObject
from wiktparse.wikiname import WikiName

CHUNKS = [
    [(1, "dog", "woof"), (2, "cat", "meow")],
    [(3, "Thesaurus:pet", "animals")],
]


def _page_xml(page_id, title, text):
    return (
        f"  <page>\n    <title>{escape(title)}</title>\n    <id>{page_id}</id>\n"
        f"    <revision>\n      <text>{escape(text)}</text>\n    </revision>\n  </page>\n"
    )


def _build_dump(wiki_path, index_path, chunks):
    blob = bytearray()
    offsets = []
    lines = []
    for chunk in chunks:
        offset = len(blob)
        offsets.append(offset)
        xml = "".join(_page_xml(*page) for page in chunk)
        blob += bz2.compress(xml.encode("utf-8"))
        lines.extend(f"{offset}:{page_id}:{title}" for page_id, title, _ in chunk)
    with open(wiki_path, "wb") as handle:
        handle.write(bytes(blob))
    with bz2.open(index_path, "wt", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")
    return offsets, len(blob)


@pytest.fixture
def dump(tmp_path):
    directory = tmp_path / "Wiktionary"
    directory.mkdir()
    (directory / "DATE").write_text("20240101\n", encoding="utf-8")
    name = WikiName(dump_root=tmp_path)
    name.wikt_name("xx")
    offsets, size = _build_dump(name.wiki_path, name.index_path, CHUNKS)
    return name, offsets, size


def test_read_index_offsets(dump):
    name, offsets, size = dump
    index = Index(name)
    index.read_index()
    assert index.index_vec == offsets + [size]
    assert len(index) == len(CHUNKS)


def test_read_index_titles(dump):
    name, _, _ = dump
    index = Index(name)
    index.read_index()
    assert index.get_indexed_object("cat") == IndexedObject(2, "cat", 0)
    assert index.get_indexed_object("Thesaurus:pet") == IndexedObject(3, "Thesaurus:pet", 1)
    assert set(index.object_map) == {"dog", "cat", "Thesaurus:pet"}


def test_missing_term(dump):
    name, _, _ = dump
    index = Index(name)
    index.read_index()
    assert index.get_indexed_object("bird") == IndexedObject(0, "bird", -1)


def test_streaming_chunks(dump):
    name, offsets, size = dump
    with Index(name) as index:
        chunks = list(iter(index.get_chunk, None))
    assert [chunk.start_pos for chunk in chunks] == offsets
    assert chunks[-1].end_pos == size
    assert [len(chunk.elems) for chunk in chunks] == [len(c) for c in CHUNKS]


def test_open_twice_fails(dump):
    name, _, _ = dump
    index = Index(name)
    index.open()
    try:
        with pytest.raises(RuntimeError):
            index.open()
    finally:
        index.close()


def test_get_chunk_when_closed(dump):
    name, _, _ = dump
    with pytest.raises(RuntimeError):
        Index(name).get_chunk()


def test_missing_index_file(tmp_path):
    name = WikiName(index_path=str(tmp_path / "none.txt.bz2"))
    with pytest.raises(FileNotFoundError):
        Index(name).read_index()
import bz2
from xml.sax.saxutils import escape

import pytest

from wiktparse.index import Index
from wiktparse.wikifile import WikiFile
from wiktparse.wikiname import WikiName

CHUNKS = [
    [(1, "dog", "woof"), (2, "cat", "me<!-- hidden -->ow")],
    [(3, "bird", "tweet")],
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
    index = Index(name)
    index.read_index()
    return index, offsets, size


def test_size_after_open(dump):
    index, _, size = dump
    with WikiFile(index) as wiki_file:
        assert wiki_file.size == size


def test_decompress_chunk_by_index(dump):
    index, offsets, _ = dump
    with WikiFile(index) as wiki_file:
        text = wiki_file.decompress_chunk_by_index(1)
        assert text == _page_xml(*CHUNKS[1][0])
        assert wiki_file.file_pos() == index.index_vec[2]


def test_decompress_index_chunk_matches(dump):
    index, _, _ = dump
    with Index(index.wiki_name) as streaming, WikiFile(index) as wiki_file:
        first = streaming.get_chunk()
        assert wiki_file.decompress_index_chunk(first) == wiki_file.decompress_chunk_by_index(0)


def test_extract_term_cleans_comments(dump):
    index, _, _ = dump
    with WikiFile(index) as wiki_file:
        assert wiki_file.extract_term("cat") == "meow"
        assert wiki_file.extract_term("bird") == "tweet"


def test_extract_missing_term(dump):
    index, _, _ = dump
    with WikiFile(index) as wiki_file:
        assert wiki_file.extract_term("fish") == ""


def test_not_open(dump):
    index, _, _ = dump
    with pytest.raises(RuntimeError):
        WikiFile(index).decompress_chunk_by_index(0)


def test_open_missing_file(tmp_path):
    index = Index(WikiName(wiki_path=str(tmp_path / "none.xml.bz2")))
    with pytest.raises(FileNotFoundError):
        WikiFile(index).open()
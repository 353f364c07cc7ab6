# wiktparse

Utilities for the "pages-articles-multistream" dumps of Wiktionary,
Wikipedia and Wikidata, and for parsing the wikitext inside them. It has no
dependencies beyond the standard library.

## What it does

- Reads the bzip2-compressed multistream index line by line
  (`wiktparse.liner.Bz2Liner`), groups its entries into chunks that share a
  stream offset (`wiktparse.chunker.WikiChunker`) and keeps a title lookup
  (`wiktparse.index.Index`).
- Decompresses single chunks of the dump on demand and returns the text of a
  page by title (`wiktparse.wikifile.WikiFile`).
- Extracts page titles and texts from a chunk of dump XML
  (`wiktparse.pages.PageXml`); `all_from_chunk` keeps main entries,
  translation subpages and thesaurus pages, as classified by
  `wiktparse.titles.get_title_type`.
- Removes HTML comments while keeping the content of `<nowiki>` sections
  (`wiktparse.comments.clean_comments`), or splits text into active and
  nowiki fragments (`wiktparse.comments.preparse`).
- Parses wikitext into templates, wiki links, known HTML-like tags, headers
  and plain text (`wiktparse.markup_parser.MarkupParser`,
  `TemplateParser`, `WikiLinkParser`); the nodes are in `wiktparse.markup`.
- Pulls outermost `{{...}}` calls out of a page
  (`wiktparse.templates.extract_templates`).
- Builds an outline of a page from its `==` headers
  (`wiktparse.header_tree.parse_indented_tree`, `print_tree`).
- Reports progress of long passes over a file (`wiktparse.progress.Progress`).
- Searches the Wikidata dump parts for pages holding given strings
  (`wiktparse.wikidata.search`).

## Installation

```
pip install .
```

## Library use

```python
from wiktparse.comments import clean_comments
from wiktparse.markup_parser import MarkupParser, TemplateParser

text = clean_comments("{{Infobox language|name=Esperanto <!-- note -->}}")
template = TemplateParser(text, 0).parse()
print(template.name)          # Infobox language
print(template.format_str())  # one parameter per line, "=" signs aligned

markup = MarkupParser("See [[word|the word]]s here.", 0).parse()
print(markup.display_text())
```

Reading a single page from a dump:

```python
from wiktparse.wikiname import WikiName
from wiktparse.index import Index
from wiktparse.wikifile import WikiFile

name = WikiName()             # dump_root defaults to ../dump
name.wikt_name("en")          # needs ../dump/Wiktionary/DATE and the dump files
index = Index(name)
index.read_index()
with WikiFile(index) as wiki_file:
    print(wiki_file.extract_term("dictionary"))
```

`WikiName.wikt_name` and `WikiName.wiki_name` look in `<dump_root>/Wiktionary`
and `<dump_root>/Wikipedia`, reading the dump date from the first line of a
`DATE` file there. Wikidata parts are looked for in `wikidata_dir`
(`../dumpWD` by default), listed in a `list.txt` that is written when missing.

## Command line

```
wiktparse --help
```

Sub-commands:

- `pages` – save the Wiktionary pages listed in `terms_to_extract.<lang>.txt`
  (for pl, en, fr, eo) as `.page` files.
- `pages-wiki` – the same for English Wikipedia, from
  `terms_to_extract.enwiki.txt`.
- `trees` – write a `.tree` header outline beside every `.page` file.
- `templates` – extract the template calls of every `.page` file.
- `pages-infoboxes` – parse and print the templates of every `.page1` file.
- `title-types` – list, per Wiktionary language except English, titles
  holding `/` or `:` and their parts.
- `wikidata-search` – collect Wikidata entities about languages and
  linguistics into a JSON-lines file.
- `split-wikidata` – sort such a JSON-lines file into one file per kind
  (`iso.jsonl`, `lang.jsonl`, `pos.jsonl`, ...).
- `remove-empty FILE` – print the non-empty lines of a file.
- `infoboxes` – collect every `Infobox language` call of English Wikipedia.
- `comments LANG` – show the lines of a Wiktionary still holding `<!--`.
- `headers` – write every header of English Wiktionary with up to ten pages
  using it.

Paths default to `../pages`, `../work` and `../dump` and can be changed with
the options each sub-command shows in its `--help`. Run without a
sub-command, `wiktparse` does what `infoboxes` does.

## What it does not do

- It does not download dumps; the dump files and the `DATE` file must already
  be in place.
- External links (`[http://... label]`) are recognised but left as plain
  text; the parser does not build nodes for them.
- The parser returns tags as single nodes; it does not pair opening and
  closing tags into `TaggedContent`, nor apply the tag handlers of
  `wiktparse.tags` to their content.

## Tests

```
pip install .[test]
pytest
```
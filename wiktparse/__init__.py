"""Reading MediaWiki multistream dumps and parsing wikitext markup."""

__version__ = "0.1.0"
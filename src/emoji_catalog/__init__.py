from .errors import EmojiCatalogError, FetchError, FormatError
from .parser import EmojiRecord, ParseResult, parse, parse_line
from .scraper import build_url, fetch_test_file, import_emoji, write_files

__all__ = [
    "EmojiCatalogError",
    "EmojiRecord",
    "FetchError",
    "FormatError",
    "ParseResult",
    "build_url",
    "fetch_test_file",
    "import_emoji",
    "parse",
    "parse_line",
    "write_files",
]

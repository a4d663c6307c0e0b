"""Bulk import parsers keyed by format."""

from typing import Callable, Dict, Optional

from models.imports import ParseResult
from parsers.csv_parser import parse_csv
from parsers.json_parser import parse_json
from parsers.xml_parser import parse_xml

Parser = Callable[[str], ParseResult]

PARSERS: Dict[str, Parser] = {
    "csv": parse_csv,
    "json": parse_json,
    "xml": parse_xml,
}


def format_for_filename(filename: str) -> Optional[str]:
    """Map ``tickets.CSV`` -> ``csv``; None for anything unsupported."""
    _, dot, extension = filename.strip().lower().rpartition(".")
    if not dot:
        return None
    return extension if extension in PARSERS else None

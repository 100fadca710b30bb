# m3ucatalog/core/reader.py
from typing import Iterator, Optional, Tuple

from m3ucatalog.core.errors import EmptyInputError, MissingHeaderError
from m3ucatalog.core.scanner import LineScanner

HEADER_TOKEN = "#EXTM3U"
ENTRY_TOKEN  = "#EXTINF"
BOM          = "\ufeff"

RawEntry = Tuple[str, str]


class PlaylistReader:
    """
    Pairs every ``#EXTINF`` line with the URL line that follows it.

    Only the header is validated strictly; everything after it is read
    leniently and an entry that never gets a URL line is dropped.
    """

    def __init__(self, content: str):
        if content.startswith(BOM):
            content = content[len(BOM):]
        self.scanner = LineScanner(content)

    def read_header(self) -> None:
        """Consume the header line, raising if it is absent or wrong."""
        while (line := self.scanner.read_line()) is not None:
            trimmed = line.strip()
            if not trimmed:
                continue
            if not trimmed.startswith(HEADER_TOKEN):
                raise MissingHeaderError()
            return
        raise EmptyInputError()

    def read_entry(self) -> Optional[RawEntry]:
        """Next ``(metadata, url)`` pair, or None once the input runs out."""
        # Metadata line; stray non-comment lines are skipped as malformed
        while True:
            line = self.scanner.read_line()
            if line is None:
                return None
            if line.strip().startswith(ENTRY_TOKEN):
                metadata = line
                break

        # URL line
        while True:
            line = self.scanner.read_line()
            if line is None:
                return None
            trimmed = line.strip()
            if trimmed and not trimmed.startswith("#"):
                return metadata, line

    def entries(self) -> Iterator[RawEntry]:
        while (entry := self.read_entry()) is not None:
            yield entry


def read_entries(content: str) -> Iterator[RawEntry]:
    """
    Validate the header eagerly, then lazily yield raw entries.

    Raises EmptyInputError / MissingHeaderError before the first entry is read.
    """
    reader = PlaylistReader(content)
    reader.read_header()
    return reader.entries()

# m3ucatalog/core/scanner.py
from typing import Optional


class LineScanner:
    """
    Cursor over the logical lines of a text buffer.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped so CRLF input reads the
    same as LF input. A final line without a newline is still returned.
    """

    def __init__(self, content: str):
        self.content = content
        self.cursor = 0

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.content)

    def read_line(self) -> Optional[str]:
        if self.exhausted:
            return None

        start = self.cursor
        end = self.content.find("\n", start)
        if end == -1:
            end = len(self.content)
            self.cursor = end
        else:
            self.cursor = end + 1

        return self.content[start:end].rstrip("\r")

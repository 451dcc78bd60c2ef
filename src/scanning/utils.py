from typing import Optional
from enum import Enum
from dataclasses import dataclass, asdict

from reader.source import file_extension

CR = 0x0D
LF = 0x0A


class LineEndingType(str, Enum):
    DOS = 'DOS/Windows'
    UNIX = 'Unix/Linux'
    MIXED = 'mixed'
    NONE = 'none detected'

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    LineEndingType.DOS: 'DOS/Windows (CRLF)',
    LineEndingType.UNIX: 'Unix/Linux (LF)',
    LineEndingType.MIXED: 'Mixed line endings',
    LineEndingType.NONE: 'No line endings detected',
}


def classify_line_endings(unix_endings: int, dos_endings: int) -> LineEndingType:
    if dos_endings > unix_endings:
        return LineEndingType.DOS
    if unix_endings > dos_endings:
        return LineEndingType.UNIX
    if unix_endings == 0 and dos_endings == 0:
        return LineEndingType.NONE
    return LineEndingType.MIXED


@dataclass(frozen=True)
class FileStats:
    total_lines: int
    unix_endings: int
    dos_endings: int
    empty_lines: int
    file_extension: Optional[str]
    file_name: str

    @classmethod
    def empty(cls, file_name: str) -> 'FileStats':
        return cls(0, 0, 0, 0, file_extension(file_name), file_name)

    @property
    def line_ending_type(self) -> LineEndingType:
        return classify_line_endings(self.unix_endings, self.dos_endings)

    @property
    def terminated_lines(self) -> int:
        return self.unix_endings + self.dos_endings

    @property
    def has_unterminated_line(self) -> bool:
        return self.total_lines > self.terminated_lines

    def to_dict(self) -> dict:
        return asdict(self)

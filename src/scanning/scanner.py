from typing import Union
from reader.source import file_extension, read_file_bytes
from .utils import CR, LF, FileStats

Buffer = Union[bytes, bytearray, memoryview]


class LineScanner:
    def __init__(self, data: Buffer):
        if isinstance(data, memoryview):
            data = data.tobytes()
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected a byte buffer, got {type(data).__name__}")
        self.data = data
        self.n = len(data)
        self._reset()

    def _reset(self):
        self.total_lines = 0
        self.unix_endings = 0
        self.dos_endings = 0
        self.empty_lines = 0
        self._line_length = 0

    def scan(self, file_name: str = '') -> FileStats:
        self._reset()
        data, n = self.data, self.n
        i = 0
        while i < n:
            byte = data[i]
            if byte == CR and i + 1 < n and data[i + 1] == LF:
                self.dos_endings += 1
                self._end_line()
                i += 2
            elif byte == LF:
                self.unix_endings += 1
                self._end_line()
                i += 1
            else:
                # a lone CR is content, not a terminator
                self._line_length += 1
                i += 1
        if self._line_length:
            self.total_lines += 1
        return self._build(file_name)

    def _end_line(self):
        self.total_lines += 1
        if self._line_length == 0:
            self.empty_lines += 1
        self._line_length = 0

    def _build(self, file_name: str) -> FileStats:
        return FileStats(
            total_lines=self.total_lines,
            unix_endings=self.unix_endings,
            dos_endings=self.dos_endings,
            empty_lines=self.empty_lines,
            file_extension=file_extension(file_name),
            file_name=file_name
        )


def scan(data: Buffer, file_name: str = '') -> FileStats:
    return LineScanner(data).scan(file_name)


def scan_file(filepath: str) -> FileStats:
    return scan(read_file_bytes(filepath), filepath)

import os
import sys
from typing import Optional

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from errors import IoError


def file_extension(file_name: str) -> Optional[str]:
    base = os.path.basename(file_name.rstrip(os.sep))
    if base == '..':
        return None
    stem, dot, ext = base.rpartition('.')
    if not dot or not stem:
        return None
    return ext


def read_file_bytes(filepath: str) -> bytes:
    try:
        with open(filepath, 'rb') as f:
            return f.read()
    except OSError as e:
        raise IoError(filepath, e) from e


class SourceFile:
    def __init__(self, filepath: str):
        self.filepath = filepath
        self._data: Optional[bytes] = None

    @property
    def data(self) -> bytes:
        if self._data is None:
            self._data = read_file_bytes(self.filepath)
        return self._data

    @property
    def size(self) -> int:
        return len(self.data)

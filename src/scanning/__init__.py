from .utils import LineEndingType, FileStats, classify_line_endings
from .scanner import LineScanner, scan, scan_file


__all__ = [
    "LineEndingType", "FileStats", "classify_line_endings",
    "LineScanner", "scan", "scan_file"
]

from typing import Optional

from scanning.utils import FileStats
from formatters.base import BaseFormatter, FormatterConfig, FormatterFactory

TITLE = "File Analysis Report"


class ReportFormatter(BaseFormatter):
    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__(config)
        self.title = TITLE

    def _format_impl(self, stats: FileStats):
        self._writeln(f"{self.colors.bold}{self.title}{self.colors.reset}")
        self._writeln("=" * len(self.title))
        self._writeln(f"File name: {stats.file_name}")
        self._writeln(f"File extension: {self.extension_text(stats)}")
        self._writeln(f"Total lines: {stats.total_lines}")
        self._writeln(f"Empty lines: {stats.empty_lines}")
        self._writeln(f"Line ending type: {stats.line_ending_type.description}")
        self._writeln(f"DOS line endings (CRLF): {stats.dos_endings}")
        self._writeln(f"Unix line endings (LF): {stats.unix_endings}")


FormatterFactory.register("text", ReportFormatter)

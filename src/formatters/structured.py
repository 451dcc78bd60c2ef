import json

from scanning.utils import FileStats
from formatters.base import BaseFormatter, FormatterFactory


class JSONFormatter(BaseFormatter):
    def _format_impl(self, stats: FileStats):
        result = stats.to_dict()
        result["line_ending_type"] = stats.line_ending_type.value
        self._writeln(json.dumps(result, indent=self.config.indent, ensure_ascii=False))


FormatterFactory.register("json", JSONFormatter)

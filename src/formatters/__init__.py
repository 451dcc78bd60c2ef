from formatters.base import (
    BaseFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget
)
from formatters.report import ReportFormatter
from formatters.structured import JSONFormatter


__all__ = [
    "BaseFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget",
    "ReportFormatter", "JSONFormatter"
]


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()


def format_report(stats, formatter_name: str = "text", config: FormatterConfig = None) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(stats)

#!/usr/bin/env python3
import argparse
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from errors import UsageError, IoError
from formatters.base import ColorScheme

PROG = 'file-analyzer'
VERSION = '1.0.0'


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: Optional[TextIO] = None, error_output: Optional[TextIO] = None):
        self.use_color = use_color
        self.output = output or sys.stdout
        self.error_output = error_output or sys.stderr
        self.colors = ColorScheme() if use_color else ColorScheme.no_color()

    def print_error(self, text: str):
        self.error_output.write(f"{self.colors.red}{text}{self.colors.reset}\n")

    def print_warning(self, text: str):
        self.error_output.write(f"{self.colors.yellow}Warning: {text}{self.colors.reset}\n")

    def print_info(self, text: str):
        self.error_output.write(f"{self.colors.cyan}{text}{self.colors.reset}\n")


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(self.prog, message)


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        from formatters import get_available_formatters
        parser = ArgumentParser(
            prog=PROG,
            description='Report line counts and line-ending style of a file',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s notes.txt
  %(prog)s --format json notes.txt
  %(prog)s -o report.txt notes.txt
  %(prog)s -- -notes.txt
            '''
        )
        parser.add_argument('file', help='File to analyze')
        parser.add_argument(
            '-f', '--format',
            choices=sorted(get_available_formatters()),
            default='text',
            help='Report format (default: text)'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write report to file'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Print diagnostic messages to stderr'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version=f'%(prog)s {VERSION}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        argv = sys.argv[1:] if argv is None else list(argv)
        try:
            args = self._parse(argv)
        except UsageError as e:
            printer = ColorPrinter(use_color=sys.stderr.isatty())
            printer.print_error(str(e))
            if '--verbose' in argv and e.detail:
                printer.print_info(e.detail)
            return e.exit_code
        except SystemExit as e:
            return e.code or 0
        use_color = not args.no_color and not args.output and sys.stdout.isatty()
        self.printer = ColorPrinter(use_color=use_color)
        try:
            return self._execute(args)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            return 130
        except Exception as e:
            self.printer.print_error(f"Error: {e}")
            return 1

    def _parse(self, argv: List[str]) -> argparse.Namespace:
        try:
            return self.parser.parse_args(argv)
        except UsageError:
            # a lone argument naming an existing file is the path, even if it looks like an option
            if len(argv) == 1 and os.path.isfile(argv[0]):
                return self.parser.parse_args(['--', argv[0]])
            raise

    def _execute(self, args) -> int:
        from formatters import FormatterConfig, create_formatter
        from reader.source import SourceFile
        from scanning.scanner import scan
        try:
            source = SourceFile(args.file)
            data = source.data
        except IoError as e:
            self.printer.print_error(f"Error analyzing file: {e}")
            return e.exit_code
        if args.verbose:
            self.printer.print_info(f"Read {source.size} bytes from {source.filepath}")
        stats = scan(data, args.file)
        config = FormatterConfig(use_color=self.printer.use_color)
        formatter = create_formatter(args.format, config)
        if args.verbose:
            self.printer.print_info(f"Rendering {args.format} report")
        report = formatter.format(stats)
        if not args.output:
            self.printer.output.write(report)
            return 0
        if os.path.exists(args.output):
            self.printer.print_warning(f"Overwriting {args.output}")
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(report)
        except OSError as e:
            self.printer.print_error(f"Error writing report: {e}")
            return 1
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())

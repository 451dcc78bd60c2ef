from typing import Optional


class AnalyzerError(Exception):
    exit_code = 1


class UsageError(AnalyzerError):
    def __init__(self, prog: str = 'file-analyzer', message: Optional[str] = None):
        self.prog = prog
        self.detail = message
        super().__init__(f"Usage: {prog} <file_path>")


class IoError(AnalyzerError):
    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(str(error))

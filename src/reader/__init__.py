from .source import read_file_bytes, file_extension, SourceFile


__all__ = ["read_file_bytes", "file_extension", "SourceFile"]

from properties.generators import (
    GeneratorConfig,
    ByteSequenceGenerator,
    TextFileGenerator,
    EdgeCaseGenerator,
    generate_random_buffers,
    generate_edge_cases
)


__all__ = [
    "GeneratorConfig",
    "ByteSequenceGenerator",
    "TextFileGenerator",
    "EdgeCaseGenerator",
    "generate_random_buffers",
    "generate_edge_cases"
]

"""
Utility modules for imfconv.

Modules:
- enum_converter: Selector parsing and conversion
- file_writer: Atomic destination writes
"""

from .enum_converter import parse_enum
from .file_writer import write_atomically

__all__ = [
    "parse_enum",
    "write_atomically",
]

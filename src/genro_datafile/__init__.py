# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-DataFile - Human readable hierarchical property files.

A lightweight, zero-dependency library to read, navigate, edit and write
files made of named, optionally multi-valued properties nested in
brace-delimited groups.
"""

__version__ = "0.1.0"

from .exceptions import (
    DataFileError,
    FormatError,
    InvalidParentError,
    MissingChildError,
    OutOfRangeError,
    StructuralError,
    ValueIndexError,
)
from .node import DataNode
from .options import DEFAULT_INDENT, DEFAULT_SEPARATOR, FormatOptions
from .parser import DataFileParser, ParserState, load, loads, parse_lines, read, split_values
from .paths import get_property, has_property, indexed_name, split_path
from .writer import DataFileWriter, dumps, write

__all__ = [
    # Core classes
    "DataNode",
    "FormatOptions",
    "DEFAULT_INDENT",
    "DEFAULT_SEPARATOR",
    # Parsing
    "DataFileParser",
    "ParserState",
    "parse_lines",
    "split_values",
    "load",
    "loads",
    "read",
    # Writing
    "DataFileWriter",
    "dumps",
    "write",
    # Paths
    "get_property",
    "has_property",
    "indexed_name",
    "split_path",
    # Exceptions
    "DataFileError",
    "FormatError",
    "OutOfRangeError",
    "ValueIndexError",
    "MissingChildError",
    "InvalidParentError",
    "StructuralError",
]

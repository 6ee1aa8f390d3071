# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Writer for DataFile text.

Leaves are written as ``name = v1, v2``; a value that is empty or contains
the separator is wrapped in double quotes. Branches are written as a header
line, an opening brace, the indented children and a closing brace,
surrounded by blank lines. Comment children are written back verbatim.

Example:
    >>> root = DataNode()
    >>> root['sub']['x'].set_int(1)
    >>> print(dumps(root, indent='  '), end='')
    <BLANKLINE>
    sub
    {
      x = 1
    }
    <BLANKLINE>
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .node import DataNode
from .options import FormatOptions, resolve_options
from .parser import CLOSE_SCOPE, OPEN_SCOPE, QUOTE

ENCODING = 'utf-8'


class DataFileWriter:
    """Depth-first renderer of a DataNode tree.

    Attributes:
        options: Indentation and separator to write with.
    """

    def __init__(
        self,
        options: FormatOptions | None = None,
        indent: str | None = None,
        separator: str | None = None,
    ) -> None:
        self.options = resolve_options(options, indent=indent, separator=separator)

    def format_value(self, value: str) -> str:
        """Quote value if it is empty or contains the separator."""
        if not value or self.options.separator in value:
            return f"{QUOTE}{value}{QUOTE}"
        return value

    def format_values(self, values: Iterable[str]) -> str:
        """Join values with the separator and a space."""
        return self.options.list_separator.join(self.format_value(v) for v in values)

    def iter_chunks(self, node: DataNode, depth: int = 0) -> Iterator[str]:
        """Yield the text of node's children, one statement at a time.

        Args:
            node: Node whose children are written; node itself is not.
            depth: Indentation level of the children.
        """
        pad = self.options.indent * depth
        for name, child in node.children():
            if child.is_comment:
                yield f"{pad}{name}\n"
            elif child.is_leaf:
                yield f"{pad}{name} = {self.format_values(child.values)}\n"
            else:
                yield f"\n{pad}{name}\n{pad}{OPEN_SCOPE}\n"
                yield from self.iter_chunks(child, depth + 1)
                yield f"{pad}{CLOSE_SCOPE}\n\n"


def dumps(
    node: DataNode,
    indent: str | None = None,
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
) -> str:
    """Render a tree as DataFile text.

    Args:
        node: Root of the tree.
        indent: Indentation unit (default one tab).
        separator: List separator (default ',').
        options: Formatting options; indent and separator override it.

    Returns:
        The document text.
    """
    writer = DataFileWriter(options, indent=indent, separator=separator)
    return ''.join(writer.iter_chunks(node))


def write(
    node: DataNode,
    path: str | os.PathLike[str],
    indent: str | None = None,
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
) -> bool:
    """Write a tree to a file, creating or truncating it.

    The text is encoded as UTF-8 with '\\n' line endings. A failure while
    writing leaves a partial file behind.

    Args:
        node: Root of the tree.
        path: Destination file.
        indent: Indentation unit (default one tab).
        separator: List separator (default ',').
        options: Formatting options; indent and separator override it.

    Returns:
        True once the whole tree has been written.

    Raises:
        OSError: If the file cannot be created or written.
    """
    writer = DataFileWriter(options, indent=indent, separator=separator)
    with Path(path).open('wb') as stream:
        for chunk in writer.iter_chunks(node):
            stream.write(chunk.encode(ENCODING))
    return True

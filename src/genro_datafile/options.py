# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Formatting options shared by the parser and the writer.

The separator used to write a file must be the one used to read it back,
otherwise quoted values are split in the wrong places.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDENT = '\t'
DEFAULT_SEPARATOR = ','


@dataclass(frozen=True)
class FormatOptions:
    """Indentation and list separator for a DataFile document.

    Example:
        >>> FormatOptions(indent='    ', separator=';')
        FormatOptions(indent='    ', separator=';')
    """

    indent: str = DEFAULT_INDENT
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )
        if self.separator in '"\r\n':
            raise ValueError(f"separator {self.separator!r} is reserved")
        if self.indent.strip(' \t'):
            raise ValueError(
                f"indent must contain only spaces and tabs, got {self.indent!r}"
            )

    @property
    def list_separator(self) -> str:
        """Separator as written between values, followed by a space."""
        return self.separator + ' '


def resolve_options(
    options: FormatOptions | None = None,
    indent: str | None = None,
    separator: str | None = None,
) -> FormatOptions:
    """Build the effective options from an instance and keyword overrides."""
    base = options or FormatOptions()
    if indent is None and separator is None:
        return base
    return FormatOptions(
        indent=base.indent if indent is None else indent,
        separator=base.separator if separator is None else separator,
    )

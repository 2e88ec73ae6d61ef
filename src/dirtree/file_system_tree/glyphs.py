"""Connector glyphs used to draw the tree."""

from dataclasses import dataclass

from dirtree.types import TreeFormat


@dataclass(frozen=True)
class GlyphStyle:
    """The four connector strings for one output format.

    Attributes:
        branch: Drawn before an entry that has siblings after it.
        corner: Drawn before the last entry of a directory.
        vertical: Prefix continuation below an entry that has siblings after it.
        space: Prefix continuation below the last entry of a directory.

    Example:
        >>> style = style_for(TreeFormat.ASCII)
        >>> style.connector(is_last=False) + "src"
        '|-- src'
        >>> repr(style.continuation(is_last=True))
        "'    '"
    """

    branch: str
    corner: str
    vertical: str
    space: str

    def connector(self, is_last: bool) -> str:
        return self.corner if is_last else self.branch

    def continuation(self, is_last: bool) -> str:
        return self.space if is_last else self.vertical


ASCII_STYLE = GlyphStyle(branch="|-- ", corner="+-- ", vertical="|   ", space="    ")
UNICODE_STYLE = GlyphStyle(branch="├── ", corner="└── ", vertical="│   ", space="    ")


def style_for(tree_format: TreeFormat) -> GlyphStyle:
    """Return the glyph style for a tree format."""
    if tree_format == TreeFormat.ASCII:
        return ASCII_STYLE
    return UNICODE_STYLE

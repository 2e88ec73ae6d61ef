"""Directory walking and tree rendering.

This package lists directory entries, draws them with the configured glyph
style and walks the hierarchy depth-first, guarding against cycles.
"""

"""Terminal line editor with a grapheme-indexed buffer core."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "session",
    "view",
]

__version__ = "0.1.0"

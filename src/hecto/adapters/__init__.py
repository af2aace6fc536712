"""Host adapters that put the editor session on a screen."""

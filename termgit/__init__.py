"""Building blocks of a terminal user interface for git: key bindings,
file trees with folding and navigation, commit log batches, layout
geometry, a spinner and a version value."""

__version__ = "0.1.0"
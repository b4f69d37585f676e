"""Terminal browser for a library of table files.

Presents a navigable list of catalog items next to a detail pane and a
key-binding footer, using Rich for drawing and readchar for input.
"""

__version__ = "0.1.0"

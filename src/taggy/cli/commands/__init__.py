"""CLI command implementations.

Each module in this package implements a specific taggy subcommand:
    read.py: Display the tags of a file
    write.py: Write a tag into a file
    remove.py: Delete tags from a file
"""

from .read import cmd_read
from .remove import cmd_remove
from .write import cmd_write

__all__ = [
    "cmd_read",
    "cmd_remove",
    "cmd_write",
]

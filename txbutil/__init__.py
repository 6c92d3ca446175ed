"""Small utility library: integer log2, MD5, permutations, string helpers, a string read stream, a linked list, a queue, a keyed list and a dynamic array."""

__version__ = "0.1.0"
__all__ = [
    "log2",
    "md5",
    "permute",
    "strutil",
    "readstream",
    "linkedlist",
    "fifo",
    "keyedlist",
    "dynarray",
]
"""Classic data-structure and algorithm routines: arrays, searching, sorting,
stacks, strings, binary trees and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "searching", "sorting", "stack", "strings", "tree", "singly", "doubly"]
"""Classic algorithm exercises on linked lists, trees, arrays, strings, bits, matrices and n-queens."""

__version__ = "0.1.0"
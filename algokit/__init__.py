"""Classic algorithms on arrays, strings, bits, grids, graphs and binary trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "graphs", "grids", "optimize", "strings", "trees"]
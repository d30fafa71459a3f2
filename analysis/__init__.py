from .comparison import ComparisonRow, compare_methods, comparison_table, format_comparison

__all__ = ["ComparisonRow", "compare_methods", "comparison_table", "format_comparison"]

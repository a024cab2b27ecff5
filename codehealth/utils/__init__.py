"""
Utility functions for codehealth.
"""

from codehealth.utils.files import has_extension, iter_source_files

__all__ = [
    "has_extension",
    "iter_source_files",
]

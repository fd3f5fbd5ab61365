"""
Persian web font optimizer.

Subsets fonts to Persian, Arabic and Latin character ranges, writes the
optimized files and the matching @font-face CSS, and caches results between
builds.
"""

__version__ = "1.0.0"

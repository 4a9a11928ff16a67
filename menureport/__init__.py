"""
Menu Ratings Report.

Builds a static HTML report from a menu catalog and per-person rating logs.
"""

__version__ = "1.0.0"

"""
Data models for the menu report: menu items, ratings and per-person statistics.
"""

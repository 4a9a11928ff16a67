"""
Utility modules for the menu report.

Cross-cutting concerns:
- Storage: reading delimited records and discovering rating files
"""

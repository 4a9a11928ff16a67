"""
Pipeline stages for the menu report.

Contains the modules a report run passes through:
- Menu Loader
- Rating Loader
- Aggregation (per-person statistics)
- Rendering (HTML page and summary table)
"""

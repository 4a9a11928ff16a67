"""
Menu Registry Module.

Single source of truth for the menu catalog during a report run.
Owns item lookup by number and attaching ratings to items.
"""

"""
console/ - Presentation Layer
==============================
Numbered text menus. Reads raw input, hands it to the handlers,
and prints what they report.
"""

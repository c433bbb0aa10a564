"""Rental Library - Utilities Package

Helpers shared by the CLI:
- Input validation for the add-book form
- Inventory and statistics rendering
"""

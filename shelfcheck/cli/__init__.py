"""Command-line frontend for the Shelfcheck core engine."""

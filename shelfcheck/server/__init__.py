"""FastAPI frontend for the Shelfcheck core engine."""

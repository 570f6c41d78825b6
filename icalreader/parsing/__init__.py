"""Low level parsing of calendar content into content lines."""

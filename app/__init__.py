"""Currency catalog and conversion service."""

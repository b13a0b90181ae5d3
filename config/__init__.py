"""Ace Hardware store locator configuration: URL templates, field names and the default mapping file."""

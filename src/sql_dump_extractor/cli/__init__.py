"""Command-line interface for the SQL dump extractor."""

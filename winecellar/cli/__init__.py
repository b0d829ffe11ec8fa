"""Command line tools for the wine cellar."""

"""Command-line front end for aldar."""

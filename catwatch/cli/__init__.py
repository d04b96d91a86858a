"""Command line tools for catwatch."""

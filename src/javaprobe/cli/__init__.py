"""Command-line interface for javaprobe."""

"""Command-line and HTTP front ends for roster_merge."""

"""Framework, grid tools and 2025 solutions for Advent of Code puzzles."""

__version__ = "0.1.0"
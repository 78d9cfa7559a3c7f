"""Solutions for days 1 to 5 of the 2025 Advent of Code puzzles and their registry."""
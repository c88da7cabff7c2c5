"""Component tests for the goban scoring project.

This package contains detailed tests for the board model:
1. Board - Cell access, groups, liberties, captures and hashing (core/board.py)
2. Scoring - Scoring mode, territory and dead groups (core/board.py)
3. Liberty - Liberty and group summaries (core/liberty.py)
"""

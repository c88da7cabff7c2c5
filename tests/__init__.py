"""Test package for the goban scoring project.

This package contains all test modules organized by test type:
- unit/: Unit tests for individual modules
- components/: Component tests for the board model and scoring
- integration/: Integration tests against the REST service
"""

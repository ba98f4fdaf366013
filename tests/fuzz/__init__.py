"""Fuzz testing infrastructure for stateprop.

This package contains:
- test_generation_depth_exhaustion: long-sequence generation, MAX_DEPTH
  boundaries for argument walking and large end-to-end budgets

Python 3.13+.
"""

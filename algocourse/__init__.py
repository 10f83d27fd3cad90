"""Introductory algorithms and data structures: searching, sorting, stacks,
queues, linked lists, the Game of Life, Monte Carlo pi, iris averages and
PGM image filters."""

__version__ = "1.0.0"
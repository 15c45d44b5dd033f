"""Advent of Code 2025 solvers for days 1 to 6 and a puzzle input downloader."""

__version__ = "0.1.0"
__all__ = ["fetch", "day01", "day02", "day03", "day04", "day05", "day06"]
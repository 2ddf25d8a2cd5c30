"""Publish Jest results to GitHub as check runs and coverage comments."""

__version__ = "0.1.0"

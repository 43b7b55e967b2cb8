"""CLI display helpers."""

from .summary import render_run_summary

__all__ = ["render_run_summary"]

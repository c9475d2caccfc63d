"""Worked solutions to Rust learning exercises, with rust-analyzer and status-line helpers."""

__version__ = "5.4.0"
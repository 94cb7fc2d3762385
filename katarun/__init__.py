"""Compile, run and check the state of small Rust exercises."""

__version__ = "5.5.1"
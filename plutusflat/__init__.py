"""Flat bit-level encoding for Untyped Plutus Core constants, binders, builtins and Plutus data."""

__version__ = "0.1.0"
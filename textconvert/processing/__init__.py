"""Processing pipeline for textconvert."""

from .pipeline import run_pipeline

__all__ = ["run_pipeline"]

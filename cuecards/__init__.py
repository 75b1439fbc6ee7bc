"""Cue card sample answers: segmentation, export and copy acknowledgments."""

__version__ = "1.0.0"

"""Subtitle conversion to WebVTT and editable cue lists."""

__version__ = "0.1.0"

"""
Helper utilities for the coordinates extractor.
"""

"""
PDF Coordinates Extractor

Finds keyword-matched text on the first page of a PDF and reports its
position scaled into a template coordinate space.
"""

__version__ = "1.0.0"

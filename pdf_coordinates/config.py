"""
Configuration constants for the coordinates extractor.

Template defaults describe an A4 page in millimeters with the origin at the
top-left corner. When no template height is given the Y axis reuses the X
scale factor.
"""

# Template defaults
DEFAULT_TEMPLATE_X = 0.0
DEFAULT_TEMPLATE_Y = 0.0
DEFAULT_TEMPLATE_WIDTH = 210.0
DEFAULT_TEMPLATE_HEIGHT = None

# Y axis conventions a text source can report its raw positions in
Y_AXIS_TOP = "top"
Y_AXIS_BOTTOM = "bottom"
Y_AXIS_ORIGINS = (Y_AXIS_TOP, Y_AXIS_BOTTOM)

# PDF backends
BACKEND_PYMUPDF = "pymupdf"
BACKEND_PDFPLUMBER = "pdfplumber"
BACKENDS = (BACKEND_PYMUPDF, BACKEND_PDFPLUMBER)
DEFAULT_BACKEND = BACKEND_PYMUPDF

# Output encodings
FORMAT_JSON = "json"
FORMAT_ARRAY = "array"
OUTPUT_FORMATS = (FORMAT_JSON, FORMAT_ARRAY)
DEFAULT_FORMAT = FORMAT_JSON
JSON_INDENT = 2
ARRAY_INDENT = "    "

# Keyword configuration written by `keywords --create`
SAMPLE_KEYWORDS = {
    "keywords": [
        {"field": "date", "keyword": "Date"},
        {"field": "name", "keyword": "Name"},
        {"field": "signature", "keyword": "Signature"},
    ]
}

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

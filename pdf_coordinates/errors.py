"""
Exception types for the coordinates extractor.

Every error is terminal for the current run: the CLI reports it and exits
with a non-zero status without writing any output file.
"""


class ExtractorError(Exception):
    """Base class for errors reported to the user by the CLI."""
    pass


class ConfigurationError(ExtractorError):
    """Raised when the keyword file or template options are invalid."""
    pass


class InputError(ExtractorError):
    """Raised when the PDF file is missing or cannot be read."""
    pass


class PDFParseError(InputError):
    """Raised when the PDF backend cannot parse the document or it has no pages."""
    pass


class EmptyResultError(ExtractorError):
    """Raised when no keyword matched any text fragment."""
    pass


class OutputError(ExtractorError):
    """Raised when the results cannot be written to the output file."""
    pass

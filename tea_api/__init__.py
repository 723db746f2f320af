"""Tea API: an in-memory REST fixture for API specification generators."""

__version__ = "1.0.0"

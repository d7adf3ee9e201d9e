"""In-memory booking form: ticket catalog, schema validation and form lifecycle."""

__version__ = "0.1.0"

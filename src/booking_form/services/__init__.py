"""Booking form services: catalog, schema validation and form lifecycle."""

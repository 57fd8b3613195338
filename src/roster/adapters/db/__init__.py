"""Relational database plumbing: engine factory, metadata, schema, and types."""

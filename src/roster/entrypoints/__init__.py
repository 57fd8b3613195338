"""Entrypoints (inbound adapters) for ROSTER.

Expose the application to the outside world (currently the ``roster`` CLI).
Parse and validate inputs, call the bootstrapped services, and present results
or structured errors.

Dependency rule: may import `roster.bootstrap`, `roster.service_layer`, and the
error types of inner layers; avoid importing `roster.adapters` directly.
"""

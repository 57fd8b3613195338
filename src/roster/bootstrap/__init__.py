"""Bootstrap (composition root) for ROSTER.

Assembles the application at runtime: wires concrete stores (through a unit
of work) into the service layer, composes the message bus for commands and
the query facade for reads, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `roster.adapters`, `roster.service_layer`,
  `roster.interfaces`, `roster.domain`, and `roster.config`.
- Inner layers must not import `roster.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]

"""Service layer for ROSTER.

Implements application use-cases: department resolution, employee admission,
the employee queries, command handlers, and transaction boundaries. Talks to
persistence only through the store interfaces.

Dependency rule: may import `roster.domain` and `roster.interfaces`, but not
`roster.adapters` or `roster.entrypoints`.
"""

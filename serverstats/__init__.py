"""Pure frps server statistics types and parsing helpers.

Nothing in this package imports Django; it only normalizes numbers reported by
the frps dashboard API into small immutable value objects.
"""

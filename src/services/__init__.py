"""Business logic services used by handlers.

Handlers never construct services themselves; they receive the
``ServiceRegistry`` built once per container by ``handlers.main``.
"""

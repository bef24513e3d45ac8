"""
accesslist test suite.

- Resource registration, grants, revokes and queries
- Configuration and the verbose callback
- Exceptions
- Introspection helpers
"""

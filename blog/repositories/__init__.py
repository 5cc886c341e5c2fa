"""
Persistence adapters.

These modules encapsulate how posts are stored/retrieved (SQL in production,
a dict in tests). Services depend on the PostRepository port rather than on
any of these classes.
"""

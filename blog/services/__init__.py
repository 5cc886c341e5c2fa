"""
High-level use cases for the blog API.

Service modules orchestrate the repository port to implement business rules
(validate input, create a post, edit it, remove it).

Routers (FastAPI endpoints) call these services instead of touching the
database directly.
"""

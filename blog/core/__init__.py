"""
Core utilities shared across the blog API.

This package hosts configuration helpers (env vars, pool sizing) and the
logging setup. Modules depend on these primitives instead of reading
os.environ or configuring handlers themselves.
"""

"""Blog API: posts over a layered domain/service/repository design."""

"""
Ingestion path for user model metrics: authorize, parse, derive path, write.
"""

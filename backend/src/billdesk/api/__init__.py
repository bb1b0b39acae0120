"""
API package - FastAPI routes and response schemas.
"""

"""
Infrastructure package - database access and the document store.
"""

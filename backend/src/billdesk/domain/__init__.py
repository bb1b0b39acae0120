"""
Domain package - Core dashboard logic with no external dependencies.

This package contains pure Python domain models, the classifier and
partitioner, and the presentation derivers used to render each document.
"""

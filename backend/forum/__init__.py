# forum/__init__.py
"""
Forum API: subjects, posts and replies over HTTP with session-based auth.
"""

"""
JSON API blueprints, one per record collection.
"""

"""
Presentation layer: JSON HTTP API.
"""

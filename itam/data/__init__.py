"""
Data layer: SQLAlchemy models and schema building.
"""

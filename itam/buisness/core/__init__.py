"""
Core business layer: record stores, field builders and domain errors.
"""

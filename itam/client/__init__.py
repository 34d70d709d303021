"""
Client side of the API: the data gateway a UI shell calls.
"""

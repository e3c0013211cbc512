"""
Action layer: adapts raw submissions into validated service calls.
"""

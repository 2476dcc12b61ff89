"""
Check building blocks (primitives) and the check flow.
"""

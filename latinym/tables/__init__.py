"""
Static rule and character tables, one module per script.

Everything here is built once at import time and never mutated.
"""

"""
UI Module - toolkit-independent grid components.
"""

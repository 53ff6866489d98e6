"""
Utility functions for locale-shell services
"""

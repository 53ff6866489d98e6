"""
Shared library for locale-shell services (settings, logging, storage, models)
"""

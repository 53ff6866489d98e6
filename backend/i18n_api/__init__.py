"""
Mock i18n API - development-time translation service for the UI shell
"""

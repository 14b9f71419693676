"""
Shared utilities: exceptions, constants and translations.
"""

"""
Locale support.

- languages: Reads the process's ordered preferred languages.
"""

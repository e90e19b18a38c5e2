"""
Components package.

Pure domain logic: schema metadata extraction and package sources.
"""

"""
Interfaces package: CLI and output types.
"""

"""
Shared utilities: configuration, logging, input validation
"""

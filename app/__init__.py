"""
Sales intelligence demo backend.
"""

"""
Restaurant reservation REST API.
"""

"""
Org Auth REST API
"""

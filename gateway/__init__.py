"""API gateway dispatch core.

Routes HTTP requests to business handlers and normalizes every outcome into a
wire-stable JSON response (success envelope or CF-style error envelope).
"""

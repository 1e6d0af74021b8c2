"""
Application layer for the workout generation API.

This package contains:
- ports/: Protocol interfaces for the catalog store and catalog source
- exceptions.py: the error taxonomy shared by services and routers
"""

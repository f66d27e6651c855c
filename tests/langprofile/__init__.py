"""
Language Profile Tests Package
==============================
Test suite for the German language profile.

Run all tests: python3 -m pytest tests/langprofile/ -v
Run specific: python3 -m pytest tests/langprofile/test_catalog.py -v
"""

__version__ = "1.0.0"

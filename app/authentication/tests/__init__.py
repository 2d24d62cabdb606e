"""
Tests for authentication app.

This package contains test modules for:
- test_models.py: User model and manager tests
- test_services.py: NicknameService tests
- test_views.py: Token and nickname endpoint tests

Usage:
    pytest authentication/tests/
    pytest authentication/tests/test_models.py
"""

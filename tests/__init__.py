# SHA-256 Engine Test Suite
"""
Test suite including:
- Unit tests (padding, schedule, compression, orchestration)
- Boundary layer tests
- Security and integration tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""

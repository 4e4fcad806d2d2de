"""
Forge Test Suite
================

Test organization:
- tests/unit/                    - Engine, auth, model and logging tests
- tests/services/bbbee_scoring/  - API route tests (in-memory MongoDB)

Run tests:
    pytest                          # All tests
    pytest tests/unit               # Unit tests only
    pytest --cov=services          # With coverage
"""

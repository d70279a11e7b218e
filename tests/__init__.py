"""
Unit Tests for ChessPro

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=chesspro --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""

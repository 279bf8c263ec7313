"""
Test Suite for Zabbix Reporter.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Full reporting cycles through registry and sender
    - fixtures/: Shared sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/zabbix_reporter        # With coverage
"""

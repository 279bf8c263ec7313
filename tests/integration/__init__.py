"""
Integration Tests - End-to-End Reporting Cycles.

These tests verify that all components work together correctly.
Integration tests use the InMemoryMetricRegistry and RecordingSender
to avoid a live collector while exercising the full cycle.

Test Files:
    - test_reporting_cycle.py: Registry -> reporter -> sender
"""

"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with recording or mocked senders.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_keys.py / test_units.py: Key formatting and unit conversion
    - test_sample_encoder.py: Per-kind metric expansion
    - test_discovery_synthesizer.py: LLD document synthesis
    - test_reporter.py: Reporting cycle orchestration
    - test_config_loader.py / test_builder.py: Configuration surface
"""

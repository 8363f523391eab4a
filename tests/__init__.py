"""
Test suite for simmer

Contains:
- tests/unit/          : Unit tests for Temperature, CheckedTemperature,
                         rendering, config, numerical helpers and contracts
"""

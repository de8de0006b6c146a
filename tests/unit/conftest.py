"""Unit test configuration.

Unit tests build their own stores and repositories and should not depend on
app.py or external services.
"""

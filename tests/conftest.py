"""
Root pytest configuration for stream-build-config.
"""

# Auto-bootstrap logging for all tests
from stream_build.config.logging import bootstrap_logging
bootstrap_logging()

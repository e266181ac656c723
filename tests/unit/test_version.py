"""Test basic package functionality."""

import sforce_client


def test_version():
    """Test that package version is defined."""
    assert sforce_client.__version__ == "0.1.0"

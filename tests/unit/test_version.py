"""Test basic package functionality."""

import df_client


def test_version():
    """Test that package version is defined."""
    assert hasattr(df_client, "__version__")
    assert df_client.__version__ == "0.1.0"


def test_top_level_exports():
    assert df_client.DfClient is df_client.client.DfClient
    assert df_client.Server.CAIN.value == "cain"

"""
Shared test configuration.

Figures are rendered with the non-interactive Agg backend and closed after
every test.
"""
import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def close_figures():
    """Close any figures a test left open."""
    yield
    import matplotlib.pyplot as plt
    plt.close("all")

"""Basic import tests to verify package structure."""


def test_import_moonsim():
    """Verify main package imports."""
    import moonsim
    assert moonsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from moonsim import core
    assert hasattr(core, "__doc__")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from moonsim import analysis
    assert hasattr(analysis, "__doc__")


def test_import_experiments():
    """Verify experiments module structure exists."""
    from moonsim import experiments
    assert hasattr(experiments, "__doc__")

"""Basic import tests to verify package structure."""


def test_import_jabeja():
    """Verify main package imports."""
    import jabeja
    assert jabeja.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from jabeja import core
    assert hasattr(core, "RoundOrchestrator")


def test_import_io_first():
    """Importing the io layer on its own must not trip over the core."""
    from jabeja.io import TabularFileSink, load_config
    assert callable(load_config)
    assert hasattr(TabularFileSink, "write")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from jabeja import analysis
    assert hasattr(analysis, "__doc__")

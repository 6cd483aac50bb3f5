def test_claudenv_imports():
    """Verify all claudenv submodules can be imported without errors."""
    import claudenv
    import claudenv.cli
    import claudenv.core.config
    import claudenv.core.logging
    import claudenv.detector
    import claudenv.generator
    import claudenv.validator

    assert claudenv.__version__

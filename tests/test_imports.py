def test_imports():
    """
    @brief
    Verifies that all core Kova modules are importable.

    @details
    Ensures package structure integrity and confirms that kova, kova.core,
    kova.constraints, kova.messages and kova.config are accessible without
    import errors, and that the built-in bundles ship with the package.
    """
    import kova
    import kova.config
    import kova.constraints
    import kova.core.schema
    import kova.factory
    import kova.messages
    from kova.messages.resolver import BUILTIN_BUNDLE_DIR

    # --- Assert ---
    assert all([kova, kova.config, kova.constraints, kova.core.schema, kova.factory, kova.messages])
    assert (BUILTIN_BUNDLE_DIR / "kova-default.yaml").is_file()
    assert (BUILTIN_BUNDLE_DIR / "kova-default_ja.yaml").is_file()

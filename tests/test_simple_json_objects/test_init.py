"""Test module for simple_json_objects package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import simple_json_objects

    # Assert
    assert simple_json_objects is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import simple_json_objects

    # Assert
    assert isinstance(simple_json_objects.__version__, str)
    assert simple_json_objects.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import simple_json_objects

    # Assert
    assert simple_json_objects.__author__ == "Simple JSON Objects Team"


def test_package_all_exports() -> None:
    """Test that __all__ lists resolvable public names."""
    # Arrange & Act
    import simple_json_objects

    # Assert
    for name in ("any_from", "map_from", "list_from", "array_from",
                 "JSONObjects", "ValueReader", "Feature", "JSONObjectError"):
        assert name in simple_json_objects.__all__
    for name in simple_json_objects.__all__:
        assert hasattr(simple_json_objects, name)


def test_level_one_read() -> None:
    """Test the simple functions are usable from the package root."""
    # Arrange & Act
    from simple_json_objects import any_from

    # Assert
    assert any_from('{"a": [1, "b", null]}') == {"a": [1, "b", None]}

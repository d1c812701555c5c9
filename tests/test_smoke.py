"""Smoke test — verifies test infrastructure works."""


def test_project_importable() -> None:
    """All top-level packages are importable."""
    import core  # noqa: F401
    import services  # noqa: F401
    import services.catalog  # noqa: F401
    import services.order_parser  # noqa: F401
    import services.preview  # noqa: F401

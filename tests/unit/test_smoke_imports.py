"""Smoke tests for basic package imports."""


def test_imports_smoke() -> None:
    import strsplit  # noqa: F401
    import strsplit.core  # noqa: F401
    import strsplit.libs.delimiter  # noqa: F401
    import strsplit.libs.splitter  # noqa: F401
    import strsplit.observability  # noqa: F401

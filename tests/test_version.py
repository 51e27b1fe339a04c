import makelatex


def test_get_version_matches_public_api() -> None:
    assert makelatex.get_version() == makelatex.__version__
    assert isinstance(makelatex.__version__, str)

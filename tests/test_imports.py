"""Smoke tests for package import and version."""

import fuzzdata


def test_import_package() -> None:
    assert isinstance(fuzzdata, object)


def test_version() -> None:
    assert fuzzdata.__version__ == "0.1.0"


def test_public_generators_exported() -> None:
    for name in ("gen_alpha", "gen_ipaddr", "gen_ipaddr_from_ints", "gen_time", "gen_uuid"):
        assert callable(getattr(fuzzdata, name))

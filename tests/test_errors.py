from fuzzdata import DomainConstraintError, FuzzDataError, InvalidArgumentError


def test_error_hierarchy() -> None:
    assert issubclass(InvalidArgumentError, FuzzDataError)
    assert issubclass(DomainConstraintError, FuzzDataError)
    assert issubclass(FuzzDataError, ValueError)
    assert not issubclass(InvalidArgumentError, DomainConstraintError)

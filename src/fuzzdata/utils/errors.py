"""Typed exceptions raised by samplers and generators."""


class FuzzDataError(ValueError):
    """Base class for generation errors."""


class InvalidArgumentError(FuzzDataError):
    """Raised when a length, range, symbol set or delimiter is unusable."""


class DomainConstraintError(FuzzDataError):
    """Raised when format constraints leave nothing to randomize."""

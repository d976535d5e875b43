"""
Custom exceptions for incomenorm.

Purpose
-------
Provides a unified exception hierarchy for programming and configuration
errors. Expected problems with user input are *not* exceptions: validators
return lists of human-readable messages and calculators fall back to defined
defaults. Exceptions are reserved for misuse of the API (asking the catalog for
a structure that does not exist, breaking a cycle-list invariant, loading a
malformed file).

Exception Hierarchy
-------------------
IncomeNormError (base)
├── ConfigurationError - Unknown catalog keys
├── ValidationError - Operations that would break a structural invariant
└── SchemaError - Saved income files that cannot be read back

Usage
-----
>>> from incomenorm.exceptions import ConfigurationError
>>> raise ConfigurationError("Unknown payment structure 'fortnightly'.")
"""


class IncomeNormError(Exception):
    """
    Base exception for all incomenorm errors.

    Examples
    --------
    >>> try:
    ...     incomes = load_incomes(path)
    ... except IncomeNormError as e:
    ...     click.echo(f"Error: {e}", err=True)
    """
    pass


class ConfigurationError(IncomeNormError):
    """
    Invalid configuration or parameters.

    Raised when:
    - A structure type is not part of the catalog

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "Unknown payment structure 'fortnightly'. "
    ...     "Expected one of: monthly, bi-monthly, bi-weekly, weekly, quarterly, irregular."
    ... )
    """
    pass


class ValidationError(IncomeNormError):
    """
    Structural invariant violations on edits.

    Raised when a cycle-list edit would:
    - Remove the last remaining cycle
    - Exceed the cycle limit for the frequency
    - Address a cycle index that does not exist

    Examples
    --------
    >>> raise ValidationError("At least one payment cycle is required.")
    """
    pass


class SchemaError(IncomeNormError):
    """Saved income file is missing required keys or has malformed entries."""
    pass

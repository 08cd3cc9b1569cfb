"""
Custom exceptions for CineScope.

- LoadFailure: the movie source could not be turned into a dataset at all.
- SessionNotReady: a control event arrived before the dataset finished loading,
  or after loading failed.

Rejected rows, empty filter results and degenerate statistics are not errors;
they are absorbed where they occur.
"""


class CineScopeError(Exception):
	"""Base class for CineScope errors."""


class LoadFailure(CineScopeError):
	"""
	Raised when the data source is unreachable or unparseable as a whole
	(missing file, undecodable content, missing columns, no usable rows).
	No partial dataset is ever built after this error.
	"""


class SessionNotReady(CineScopeError):
	"""Raised when control events are dispatched to a session without a dataset."""

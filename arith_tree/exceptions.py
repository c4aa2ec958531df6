"""Exceptions raised by the expression tree package."""


class InvalidNodeError(ValueError):
  """Raised when a node is constructed from missing or malformed parts"""
  pass

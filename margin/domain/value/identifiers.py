"""Strongly typed identifiers for Margin domain entities.

Identifiers are database-assigned integers; clients see them as ``objectId``.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
UserId = NewType("UserId", int)

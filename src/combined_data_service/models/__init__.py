"""Data models for combined data service."""

from .dtos import Comment, CombinedRecord, Post, User

__all__ = ["Comment", "CombinedRecord", "Post", "User"]

"""Exception hierarchy for repomap."""

from __future__ import annotations

from typing import Dict, Optional


class RepoMapError(Exception):
	"""Base exception for all repomap errors."""

	def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
		super().__init__(message)
		self.message = message
		self.details = details or {}

	def __str__(self) -> str:
		if self.details:
			details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
			return f"{self.message} ({details_str})"
		return self.message


class ConfigurationError(RepoMapError):
	"""Raised when configuration values cannot be loaded or validated."""


class InvalidPathError(RepoMapError):
	"""Raised when a scan root does not exist or is not a directory."""

	def __init__(self, path: str, reason: str = "not a directory"):
		super().__init__(f"Invalid root path: {path}", details={"reason": reason})
		self.path = path

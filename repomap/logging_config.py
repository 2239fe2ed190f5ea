"""Logging setup for the repomap command line.

Library modules only create module loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
	verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
	"""Configure the ``repomap`` logger with a rich stderr handler.

	Args:
		verbose: Enable DEBUG level logging (includes per-file skip diagnostics)
		quiet: Only show errors
		log_file: Optional file path to append plain-text logs to

	Returns:
		The configured ``repomap`` logger
	"""
	if quiet:
		level = logging.ERROR
	elif verbose:
		level = logging.DEBUG
	else:
		level = logging.WARNING

	handlers: List[logging.Handler] = [
		RichHandler(
			console=Console(stderr=True),
			rich_tracebacks=True,
			markup=False,
			show_time=True,
			show_path=verbose,
		)
	]

	if log_file:
		file_handler = logging.FileHandler(log_file, mode="a")
		file_handler.setFormatter(
			logging.Formatter(
				"%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
			)
		)
		handlers.append(file_handler)

	logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

	logger = logging.getLogger("repomap")
	logger.setLevel(level)
	return logger

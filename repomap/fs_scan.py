from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional

from .classify import classify, should_skip, wants_structure
from .config import ScanConfig
from .model import FileRecord, ScanWarning
from .structure import extract_structure


logger = logging.getLogger(__name__)

WarningSink = Callable[[ScanWarning], None]


def log_warning(warning: ScanWarning) -> None:
	logger.debug("Skipped %s: %s", warning.path, warning.reason)


def to_rel_path(base: str, path: str) -> str:
	return os.path.relpath(path, base).replace(os.sep, "/")


def count_lines(content: str) -> int:
	# Newline-delimited segments: a trailing newline adds one.
	return len(content.split("\n"))


def read_text(path: str) -> str:
	with open(path, "r", encoding="utf-8-sig", errors="replace", newline="") as fh:
		return fh.read()


def analyze_file(
	path: str,
	rel_path: str,
	config: Optional[ScanConfig] = None,
	on_warning: Optional[WarningSink] = None,
) -> Optional[FileRecord]:
	"""Build the record for one file, or None when it must be left out."""
	if config is None:
		config = ScanConfig()
	warn = on_warning or log_warning

	try:
		size = os.stat(path).st_size
	except OSError as e:
		warn(ScanWarning(path=rel_path, reason=f"stat failed: {e}"))
		return None

	if size > config.max_file_size:
		warn(ScanWarning(path=rel_path, reason=f"larger than {config.max_file_size} bytes"))
		return None

	name = os.path.basename(path)
	extension = os.path.splitext(name)[1]
	kind = classify(extension)
	line_count = 0
	structure = None

	if kind.is_text:
		try:
			content = read_text(path)
		except OSError as e:
			warn(ScanWarning(path=rel_path, reason=f"read failed: {e}"))
			return None
		line_count = count_lines(content)
		if wants_structure(extension):
			structure = extract_structure(content, extension)

	return FileRecord(
		path=rel_path,
		name=name,
		extension=extension,
		size_bytes=size,
		line_count=line_count,
		type=kind.type,
		structure=structure,
	)


def _walk(
	current: str,
	base: str,
	records: List[FileRecord],
	config: ScanConfig,
	warn: WarningSink,
	depth: int,
) -> None:
	if depth > config.max_depth:
		warn(ScanWarning(path=to_rel_path(base, current), reason=f"deeper than {config.max_depth}"))
		return

	try:
		with os.scandir(current) as it:
			entries = list(it)
	except OSError as e:
		warn(ScanWarning(path=to_rel_path(base, current), reason=f"unreadable directory: {e}"))
		return

	for entry in entries:
		if should_skip(entry.name, config):
			continue
		try:
			is_dir = entry.is_dir(follow_symlinks=False)
			is_file = not is_dir and entry.is_file(follow_symlinks=False)
		except OSError as e:
			warn(ScanWarning(path=to_rel_path(base, entry.path), reason=str(e)))
			continue

		if is_dir:
			_walk(entry.path, base, records, config, warn, depth + 1)
		elif is_file:
			record = analyze_file(entry.path, to_rel_path(base, entry.path), config, warn)
			if record is not None:
				records.append(record)


def walk_directory(
	root: str,
	config: Optional[ScanConfig] = None,
	on_warning: Optional[WarningSink] = None,
	records: Optional[List[FileRecord]] = None,
) -> List[FileRecord]:
	"""Depth-first, sequential walk of ``root``.

	Records are appended to ``records`` (a fresh list when omitted) in
	traversal order; the list is owned by this call stack until it returns.
	Order within a directory follows the filesystem listing.
	"""
	if records is None:
		records = []
	if config is None:
		config = ScanConfig()
	_walk(root, root, records, config, on_warning or log_warning, depth=0)
	return records

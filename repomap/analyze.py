from __future__ import annotations

import logging
import os
from typing import List, Optional

from .config import ScanConfig
from .fs_scan import WarningSink, walk_directory
from .insights import build_insights, count_languages
from .model import FileRecord, RepositoryAnalysis


logger = logging.getLogger(__name__)


def analyze_repository(
	root: str,
	config: Optional[ScanConfig] = None,
	on_warning: Optional[WarningSink] = None,
) -> RepositoryAnalysis:
	"""Scan ``root`` and aggregate its insights.

	Never raises: on an unexpected failure the error is logged and whatever
	was gathered up to that point is returned.
	"""
	root = os.path.abspath(root)
	analysis = RepositoryAnalysis(root=root)
	records: List[FileRecord] = []

	try:
		walk_directory(root, config, on_warning, records=records)
		analysis.file_structure = records
		analysis.languages = count_languages(records)
		analysis.insights = build_insights(records)
	except Exception as e:
		logger.error("Analysis error: %s", e)
		analysis.file_structure = records
		analysis.languages = count_languages(records)
		analysis.insights.total_files = len(records)
		analysis.insights.total_lines = sum(r.line_count for r in records)

	logger.info(
		"Scanned %s: %d files, %d lines",
		root,
		analysis.insights.total_files,
		analysis.insights.total_lines,
	)
	return analysis

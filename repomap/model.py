from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class StructureSummary(BaseModel):
	imports: List[str] = []
	exports: List[str] = []
	functions: List[str] = []
	classes: List[str] = []


class FileRecord(BaseModel):
	path: str
	name: str
	extension: str
	size_bytes: int
	line_count: int = 0
	type: str
	structure: Optional[StructureSummary] = None


class LargestFile(BaseModel):
	path: str
	human_readable_size: str
	line_count: int


class Insights(BaseModel):
	total_files: int = 0
	total_lines: int = 0
	largest_files: List[LargestFile] = []
	package_managers: List[str] = []
	frameworks: List[str] = []


class RepositoryAnalysis(BaseModel):
	root: str
	file_structure: List[FileRecord] = []
	languages: Dict[str, int] = {}
	insights: Insights = Field(default_factory=Insights)


class ScanWarning(BaseModel):
	"""A non-fatal problem met while walking; never part of the analysis itself."""

	path: str
	reason: str

"""Repository-level insights derived from a finished inventory."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, List, Sequence, Set, Tuple

from .model import FileRecord, Insights, LargestFile


LARGEST_FILES_LIMIT = 10
SIZE_UNITS = ("B", "KB", "MB", "GB")

NameCheck = Callable[[Set[str]], bool]


def _named(*candidates: str) -> NameCheck:
	return lambda names: any(c in names for c in candidates)


def _name_contains(fragment: str) -> NameCheck:
	return lambda names: any(fragment in name for name in names)


FingerprintTable = Tuple[Tuple[NameCheck, str], ...]

# Ordered (check, label) tables; a file name anywhere in the tree counts.
PACKAGE_MANAGERS: FingerprintTable = (
	(_named("package.json"), "npm/yarn"),
	(_named("requirements.txt", "Pipfile"), "pip"),
	(_named("go.mod"), "go modules"),
	(_named("Cargo.toml"), "cargo"),
	(_named("pom.xml", "build.gradle"), "maven/gradle"),
)

FRAMEWORKS: FingerprintTable = (
	(_named("next.config.js"), "Next.js"),
	(_name_contains("react"), "React"),
	(_named("vue.config.js"), "Vue"),
	(_named("angular.json"), "Angular"),
	(_named("manage.py"), "Django"),
	(_named("app.py", "wsgi.py"), "Flask"),
)


def format_bytes(size: int) -> str:
	"""Format a byte count with 1024-based units, e.g. 1536 -> "1.5 KB"."""
	if size == 0:
		return "0 B"
	i = min(int(math.floor(math.log(size) / math.log(1024))), len(SIZE_UNITS) - 1)
	# Exact ties round up: 1280 -> "1.3 KB".
	value = str(Decimal(size / math.pow(1024, i)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
	if value.endswith(".0"):
		value = value[:-2]
	return f"{value} {SIZE_UNITS[i]}"


def find_largest_files(files: Sequence[FileRecord], limit: int = LARGEST_FILES_LIMIT) -> List[LargestFile]:
	# Path breaks ties so equal sizes come back in a stable order.
	ranked = sorted(files, key=lambda f: (-f.size_bytes, f.path))
	return [
		LargestFile(path=f.path, human_readable_size=format_bytes(f.size_bytes), line_count=f.line_count)
		for f in ranked[:limit]
	]


def _fingerprint(files: Sequence[FileRecord], table: FingerprintTable) -> List[str]:
	names = {f.name for f in files}
	return [label for check, label in table if check(names)]


def detect_package_managers(files: Sequence[FileRecord]) -> List[str]:
	"""Presence-based: a manifest anywhere in the tree counts."""
	return _fingerprint(files, PACKAGE_MANAGERS)


def detect_frameworks(files: Sequence[FileRecord]) -> List[str]:
	return _fingerprint(files, FRAMEWORKS)


def count_languages(files: Sequence[FileRecord]) -> Dict[str, int]:
	languages: Dict[str, int] = {}
	for f in files:
		if f.extension:
			languages[f.extension] = languages.get(f.extension, 0) + 1
	return languages


def build_insights(files: Sequence[FileRecord]) -> Insights:
	return Insights(
		total_files=len(files),
		total_lines=sum(f.line_count for f in files),
		largest_files=find_largest_files(files),
		package_managers=detect_package_managers(files),
		frameworks=detect_frameworks(files),
	)

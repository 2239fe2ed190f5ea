from __future__ import annotations

from typing import Dict, FrozenSet, NamedTuple

from .config import ScanConfig


TEXT_EXTENSIONS: FrozenSet[str] = frozenset(
	{
		".js", ".ts", ".jsx", ".tsx", ".py", ".rb", ".go", ".java", ".c", ".cpp", ".h",
		".css", ".scss", ".sass", ".less", ".html", ".xml", ".json", ".yaml", ".yml",
		".md", ".txt", ".sh", ".bash", ".sql", ".php", ".swift", ".kt", ".rs", ".dart",
	}
)

FILE_TYPES: Dict[str, str] = {
	".js": "JavaScript",
	".ts": "TypeScript",
	".jsx": "React",
	".tsx": "React TypeScript",
	".py": "Python",
	".go": "Go",
	".java": "Java",
	".rb": "Ruby",
	".php": "PHP",
	".css": "Stylesheet",
	".scss": "Stylesheet",
	".html": "HTML",
	".json": "Config",
	".yaml": "Config",
	".yml": "Config",
	".md": "Documentation",
	".sql": "Database",
}

# Extensions that get a structure summary, even if no heuristics exist for them.
STRUCTURE_EXTENSIONS: FrozenSet[str] = frozenset(
	{".js", ".ts", ".jsx", ".tsx", ".py", ".go", ".java", ".rb"}
)

OTHER = "Other"


class Classification(NamedTuple):
	type: str
	is_text: bool


def is_text_file(extension: str) -> bool:
	return extension.lower() in TEXT_EXTENSIONS


def get_file_type(extension: str) -> str:
	return FILE_TYPES.get(extension.lower(), OTHER)


def classify(extension: str) -> Classification:
	return Classification(type=get_file_type(extension), is_text=is_text_file(extension))


def wants_structure(extension: str) -> bool:
	return extension.lower() in STRUCTURE_EXTENSIONS


def should_skip(name: str, config: ScanConfig) -> bool:
	"""Hidden entries and ignore-listed names are never traversed."""
	return name.startswith(config.hidden_prefix) or name in config.skip_names

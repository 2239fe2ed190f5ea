"""Line-heuristic structure extraction.

Each language family has an ordered rule table. Every trimmed line is tested
against the rules top to bottom and lands in at most one category. There is
no lookahead and no comment or string awareness.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, NamedTuple, Tuple

from .model import StructureSummary


FRAGMENT_LENGTH = 50

_IMPORT_FROM = re.compile(r"""import\s+(?:{[^}]+}|\S+)\s+from\s+['"]([^'"]+)['"]""", re.ASCII)
_JS_FUNCTION_DECL = re.compile(r"^(async\s+)?function\s+\w+", re.ASCII)
_JS_FUNCTION_NAME = re.compile(r"function\s+(\w+)", re.ASCII)
_CLASS_DECL = re.compile(r"^class\s+\w+", re.ASCII)
_CLASS_NAME = re.compile(r"class\s+(\w+)", re.ASCII)
_PY_DEF_DECL = re.compile(r"^def\s+\w+", re.ASCII)
_PY_DEF_NAME = re.compile(r"def\s+(\w+)", re.ASCII)


class Rule(NamedTuple):
	category: str
	matches: Callable[[str], bool]
	extract: Callable[[str], str]


def trim(line: str) -> str:
	# A byte order mark counts as leading whitespace.
	return line.strip().lstrip("\ufeff").strip()


def fragment(line: str) -> str:
	return line[:FRAGMENT_LENGTH]


def extract_import(line: str) -> str:
	match = _IMPORT_FROM.search(line)
	return match.group(1) if match else fragment(line)


def extract_function_name(line: str) -> str:
	match = _JS_FUNCTION_NAME.search(line)
	return match.group(1) if match else "anonymous"


def extract_class_name(line: str) -> str:
	match = _CLASS_NAME.search(line)
	return match.group(1) if match else "Unknown"


def extract_python_function(line: str) -> str:
	match = _PY_DEF_NAME.search(line)
	return match.group(1) if match else "anonymous"


JS_RULES: Tuple[Rule, ...] = (
	Rule("imports", lambda line: line.startswith("import "), extract_import),
	Rule("exports", lambda line: line.startswith("export "), fragment),
	Rule("functions", lambda line: bool(_JS_FUNCTION_DECL.match(line)), extract_function_name),
	Rule("classes", lambda line: bool(_CLASS_DECL.match(line)), extract_class_name),
)

PYTHON_RULES: Tuple[Rule, ...] = (
	Rule("imports", lambda line: line.startswith(("import ", "from ")), fragment),
	Rule("functions", lambda line: bool(_PY_DEF_DECL.match(line)), extract_python_function),
	Rule("classes", lambda line: bool(_CLASS_DECL.match(line)), extract_class_name),
)

RULES_BY_EXTENSION: Dict[str, Tuple[Rule, ...]] = {
	".js": JS_RULES,
	".ts": JS_RULES,
	".jsx": JS_RULES,
	".tsx": JS_RULES,
	".py": PYTHON_RULES,
}


def apply_rules(line: str, rules: Tuple[Rule, ...]) -> Tuple[str, str] | None:
	"""Return (category, value) for the first matching rule, or None."""
	for rule in rules:
		if rule.matches(line):
			return rule.category, rule.extract(line)
	return None


def extract_structure(content: str, extension: str) -> StructureSummary:
	rules = RULES_BY_EXTENSION.get(extension.lower(), ())
	found: Dict[str, List[str]] = {"imports": [], "exports": [], "functions": [], "classes": []}
	if not rules:
		return StructureSummary(**found)

	for raw in content.split("\n"):
		hit = apply_rules(trim(raw), rules)
		if hit is not None:
			category, value = hit
			found[category].append(value)

	return StructureSummary(**found)

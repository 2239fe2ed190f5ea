"""Repository structure scanner.

Modules:
- classify.py: Extension to file-type label and text/binary decision.
- structure.py: Line-heuristic imports/exports/functions/classes extraction.
- fs_scan.py: Bounded directory walk producing the file inventory.
- insights.py: Largest files, language histogram, package-manager and framework fingerprints.
- analyze.py: The analyze_repository entry point.
- model.py: Data structures for records and the aggregate analysis.
"""

from .analyze import analyze_repository
from .config import ScanConfig, load_config
from .model import FileRecord, Insights, RepositoryAnalysis, StructureSummary

__all__ = [
	"analyze_repository",
	"load_config",
	"ScanConfig",
	"FileRecord",
	"Insights",
	"RepositoryAnalysis",
	"StructureSummary",
]

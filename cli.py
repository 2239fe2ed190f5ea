from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

import uvicorn

from repomap.analyze import analyze_repository
from repomap.config import load_config
from repomap.exceptions import InvalidPathError, RepoMapError
from repomap.logging_config import setup_logging
from repomap.model import ScanWarning


def cmd_analyze(args: argparse.Namespace) -> None:
	root = os.path.abspath(args.path)
	if not os.path.isdir(root):
		raise InvalidPathError(root)

	config = load_config(args.config, max_depth=args.max_depth, max_file_size=args.max_file_size)
	warnings: List[ScanWarning] = []
	on_warning = warnings.append if args.warnings else None

	analysis = analyze_repository(root, config, on_warning)
	payload = analysis.model_dump()
	if args.warnings:
		payload = {"analysis": payload, "warnings": [w.model_dump() for w in warnings]}
	print(json.dumps(payload, indent=2))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="repomap")
	parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging, including skipped entries")
	parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
	parser.add_argument("--log-file", default=None, help="Also append logs to this file")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Scan a repository and print the analysis JSON")
	pa.add_argument("path", help="Path to repository root")
	pa.add_argument("--max-depth", type=int, default=None)
	pa.add_argument("--max-file-size", type=int, default=None, help="Bytes; larger files are left out")
	pa.add_argument("--config", default=None, help="TOML file with [repomap] settings")
	pa.add_argument("--warnings", action="store_true", help="Include skipped entries next to the analysis")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: List[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	logger = setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
	try:
		args.func(args)
	except RepoMapError as e:
		logger.error("%s", e)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())

from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from repomap.analyze import analyze_repository
from repomap.config import load_config
from repomap.exceptions import ConfigurationError
from repomap.model import RepositoryAnalysis


app = FastAPI(title="Repository Structure Scanner")


class AnalyzeRequest(BaseModel):
	root_path: str
	max_depth: Optional[int] = None
	max_file_size: Optional[int] = None


@app.get("/health")
def health() -> dict:
	return {"status": "ok"}


@app.post("/analyze", response_model=RepositoryAnalysis)
def analyze(req: AnalyzeRequest) -> RepositoryAnalysis:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	try:
		config = load_config(max_depth=req.max_depth, max_file_size=req.max_file_size)
	except ConfigurationError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e

	return analyze_repository(root, config)


def create_app() -> FastAPI:
	return app

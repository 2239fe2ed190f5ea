import os

import pytest

from repomap.config import ScanConfig
from repomap.fs_scan import analyze_file, count_lines, walk_directory


def _write(root, rel, text="x\n"):
	p = root / rel
	p.parent.mkdir(parents=True, exist_ok=True)
	p.write_text(text)
	return p


def test_count_lines_counts_segments():
	assert count_lines("a\nb") == 2
	assert count_lines("a\nb\n") == 3
	assert count_lines("") == 1


def test_walk_builds_records(tmp_path):
	_write(tmp_path, "src/app.js", "import React from 'react';\nfunction add(a, b) {\n")
	_write(tmp_path, "README.md", "# title")
	(tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00")
	_write(tmp_path, "Makefile", "all:\n")

	records = {r.path: r for r in walk_directory(str(tmp_path))}
	assert set(records) == {"src/app.js", "README.md", "logo.png", "Makefile"}

	app = records["src/app.js"]
	assert app.name == "app.js"
	assert app.extension == ".js"
	assert app.type == "JavaScript"
	assert app.line_count == 3
	assert app.structure.imports == ["react"]
	assert app.structure.functions == ["add"]

	assert records["README.md"].line_count == 1
	assert records["README.md"].structure is None

	png = records["logo.png"]
	assert png.line_count == 0
	assert png.type == "Other"
	assert png.size_bytes == 9

	assert records["Makefile"].extension == ""
	assert records["Makefile"].line_count == 0


def test_structure_only_for_allow_list(tmp_path):
	_write(tmp_path, "main.go", "import \"fmt\"\n")
	_write(tmp_path, "style.css", "import x from 'y';\n")
	records = {r.name: r for r in walk_directory(str(tmp_path))}
	assert records["main.go"].structure is not None
	assert records["main.go"].structure.imports == []
	assert records["style.css"].structure is None


def test_extension_case_preserved(tmp_path):
	_write(tmp_path, "Script.PY", "def run():\n")
	[record] = walk_directory(str(tmp_path))
	assert record.extension == ".PY"
	assert record.type == "Python"
	assert record.structure.functions == ["run"]


def test_skip_rules(tmp_path):
	_write(tmp_path, "node_modules/lib/index.js")
	_write(tmp_path, "pkg/node_modules/dep.js")
	_write(tmp_path, ".git/config")
	_write(tmp_path, ".hidden.py")
	_write(tmp_path, "dist/bundle.js")
	_write(tmp_path, "keep/ok.py")
	paths = [r.path for r in walk_directory(str(tmp_path))]
	assert paths == ["keep/ok.py"]


def test_depth_cap(tmp_path):
	shallow = tmp_path.joinpath(*[f"d{i}" for i in range(9)])
	_write(shallow, "shallow.py")
	deep = tmp_path.joinpath(*[f"e{i}" for i in range(12)])
	_write(deep, "deep.py")
	edge = tmp_path.joinpath(*[f"f{i}" for i in range(10)])
	_write(edge, "edge.py")

	names = {r.name for r in walk_directory(str(tmp_path))}
	assert "shallow.py" in names
	assert "edge.py" in names
	assert "deep.py" not in names


def test_depth_cap_configurable(tmp_path):
	_write(tmp_path, "a/b/c.py")
	_write(tmp_path, "top.py")
	names = {r.name for r in walk_directory(str(tmp_path), ScanConfig(max_depth=1))}
	assert names == {"top.py"}


def test_size_cutoff(tmp_path):
	big = tmp_path / "big.bin"
	with open(big, "wb") as fh:
		fh.truncate(10 * 1024 * 1024 + 1)
	exact = tmp_path / "exact.bin"
	with open(exact, "wb") as fh:
		fh.truncate(10 * 1024 * 1024)

	records = walk_directory(str(tmp_path))
	assert [r.name for r in records] == ["exact.bin"]
	assert all(r.size_bytes <= 10 * 1024 * 1024 for r in records)


def test_warnings_go_to_sink(tmp_path):
	_write(tmp_path, "small.txt")
	_write(tmp_path, "large.txt", "y" * 100)
	warnings = []
	records = walk_directory(str(tmp_path), ScanConfig(max_file_size=10), warnings.append)
	assert [r.name for r in records] == ["small.txt"]
	assert [w.path for w in warnings] == ["large.txt"]


def test_byte_order_mark_dropped_on_read(tmp_path):
	(tmp_path / "app.js").write_bytes(b"\xef\xbb\xbfimport React from 'react';\n")
	[record] = walk_directory(str(tmp_path))
	assert record.line_count == 2
	assert record.structure.imports == ["react"]


def test_invalid_utf8_still_counted(tmp_path):
	(tmp_path / "notes.txt").write_bytes(b"caf\xe9\nline two\n")
	[record] = walk_directory(str(tmp_path))
	assert record.line_count == 3


def test_missing_root_yields_nothing(tmp_path):
	warnings = []
	assert walk_directory(str(tmp_path / "missing"), on_warning=warnings.append) == []
	assert len(warnings) == 1


def test_analyze_file_missing(tmp_path):
	assert analyze_file(str(tmp_path / "gone.py"), "gone.py") is None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinks_not_followed(tmp_path):
	target = tmp_path / "real"
	_write(target, "mod.py")
	os.symlink(target, tmp_path / "link")
	paths = [r.path for r in walk_directory(str(tmp_path))]
	assert paths == ["real/mod.py"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_unreadable_directory_skipped(tmp_path):
	locked = tmp_path / "locked"
	_write(locked, "secret.py")
	_write(tmp_path, "open.py")
	locked.chmod(0)
	try:
		paths = [r.path for r in walk_directory(str(tmp_path))]
	finally:
		locked.chmod(0o755)
	assert paths == ["open.py"]

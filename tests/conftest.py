"""
Shared pytest fixtures for the tnt tests.

- `sidecar`: a complete metadata document as a dict.
- `write_sidecar`: writes a document (dict, str or bytes) to a temp file.
- `write_list`: writes a path-list file.
"""
import json
from pathlib import Path

import pytest

from tnt.utils import LogLevel, logger


@pytest.fixture(autouse=True)
def reset_log_level():
    """Keep the module-level log level from leaking between tests."""
    logger.set_log_level(LogLevel.INFO)
    yield
    logger.set_log_level(LogLevel.INFO)


@pytest.fixture
def sidecar() -> dict:
    """A realistic metadata document with every schema field set."""
    return {
        "project": "Кот в сапогах",
        "project_en": "Puss in Boots",
        "season": 1,
        "season_title": "Сезон 1",
        "episode": 3,
        "episode_global": 3,
        "title": "Серия 3",
        "description": "Кот отправляется в путь.",
        "pg": "6+",
        "duration": "00:24:10",
        "files": {
            "mp4": "kot_s01e03.mp4",
            "md5": "9e107d9d372bb6826bd81d3542a419d6",
            "mxf": {"video": "kot_s01e03.mxf", "audio": ["ru.wav", "en.wav"]},
        },
        "provider_id": {
            "project_id": 1042,
            "season_id": 7,
            "program_id": "P-1042-01",
            "content_id": "C-88213",
        },
        "efir_date": "2019-03-01",
        "start_date": "2019-03-01",
        "end_date": "2024-03-01",
        "countries": ["RU"],
        "generation_date": "2019-02-20T10:00:00",
    }


@pytest.fixture
def write_sidecar(tmp_path):
    """Return a helper writing a document into tmp_path/in/<name>."""
    in_dir = tmp_path / "in"
    in_dir.mkdir()

    def _write(name: str, document) -> Path:
        path = in_dir / name
        if isinstance(document, dict):
            document = json.dumps(document, ensure_ascii=False)
        if isinstance(document, str):
            document = document.encode("utf-8")
        path.write_bytes(document)
        return path

    return _write


@pytest.fixture
def write_list(tmp_path):
    """Return a helper writing a path-list file into tmp_path."""

    def _write(paths, name: str = "files.txt") -> Path:
        list_file = tmp_path / name
        list_file.write_text("\n".join(str(p) for p in paths) + "\n", encoding="utf-8")
        return list_file

    return _write


@pytest.fixture
def out_dir(tmp_path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path

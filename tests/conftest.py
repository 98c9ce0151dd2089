import logging
from pathlib import Path

import pytest

from tests.infrastructure import SAMPLE_MODULES, make_asset, make_chunk, write, write_profile


@pytest.fixture
def sample_chunk() -> str:
    return make_chunk(SAMPLE_MODULES)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Каталог проекта с файлами модулей на диске (размеры известны)."""
    root = tmp_path / "project"
    write(root / "src" / "index.js", "x" * 10)
    write(root / "src" / "unused.js", "x" * 30)
    write(root / "node_modules" / "lodash" / "map.js", "x" * 120)
    write(root / "node_modules" / "@scope" / "pkg" / "index.js", "x" * 50)
    return root


@pytest.fixture
def profile_file(tmp_path: Path, sample_chunk: str) -> Path:
    """Профиль: исполнен только ./src/index.js, плюс CSS-ассет и скрипт без реестра."""
    start = sample_chunk.index("const main")
    end = sample_chunk.index("main();") + len("main();")
    assets = [
        make_asset("https://example.com/static/js/main.js?v=3", sample_chunk, [(start, end)]),
        make_asset("https://example.com/static/css/main.css", "body{}", [(0, 6)]),
        make_asset("https://example.com/static/js/runtime.js", "console.log(1);", [(0, 15)]),
    ]
    return write_profile(tmp_path / "coverage.json", assets)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch):
    # bcov.yaml ищется в текущем каталоге — не подхватываем чужой
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BCOV_DEBUG", raising=False)


@pytest.fixture(autouse=True)
def _reset_bcov_logging():
    # cli.main вешает StreamHandler на текущий sys.stderr (подменённый capsys)
    yield
    logger = logging.getLogger("bcov")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)

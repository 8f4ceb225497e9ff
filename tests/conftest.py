from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from yash.core.config import YashConfig  # noqa: E402
from yash.services.registry import Yash  # noqa: E402

DATABASE_YAML = """\
development:
  host: localhost
  port: 1234
production:
  host: <%= ENV['HOST'] %>
  port: <%= ENV['PORT'] %>
  foo: production_foo
"""


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "config" / "settings"
    directory.mkdir(parents=True)
    (directory / "database.yml").write_text(DATABASE_YAML, encoding="utf-8")
    (directory / "twitter.yml").write_text(
        "production:\n  api_key: <%= ENV['twitter_api_key'] %>\n", encoding="utf-8"
    )
    return directory


@pytest.fixture
def yash_instance(config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Yash:
    monkeypatch.setenv("HOST", "1.2.3.4")
    monkeypatch.setenv("PORT", "5432")
    monkeypatch.setenv("twitter_api_key", "twitter_foo")
    return Yash(YashConfig(default_folder=str(config_dir)))

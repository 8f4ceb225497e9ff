from pathlib import Path

import pytest

from yash.core.errors import ParseError, ReadError
from yash.core.parser import YamlTemplateParser


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(content, encoding="utf-8")
    return path


def test_parser_expands_environment_variables(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOST", "1.2.3.4")
    path = _write(tmp_path, "host: <%= ENV['HOST'] %>\n")

    assert YamlTemplateParser().parse(path) == {"host": "1.2.3.4"}


def test_parser_handles_multiple_directives_across_lines(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOST", "db.internal")
    monkeypatch.setenv("PORT", "5432")
    path = _write(
        tmp_path,
        "production:\n"
        "  host: <%= ENV['HOST'] %>\n"
        "  port: <%= ENV['PORT'] %>\n"
        "  url: postgres://<%= ENV['HOST'] %>:<%= ENV['PORT'] %>/app\n",
    )

    data = YamlTemplateParser().parse(path)

    assert data["production"]["host"] == "db.internal"
    assert data["production"]["port"] == 5432
    assert data["production"]["url"] == "postgres://db.internal:5432/app"


def test_parser_supports_statements_and_comments(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("REPLICAS", raising=False)
    path = _write(
        tmp_path,
        "<%# generated list %>\n"
        "hosts:\n"
        "<% for name in ['a', 'b'] %>\n"
        "  - <%= name %>.example.com\n"
        "<% endfor %>\n"
        "replicas: <%= ENV.get('REPLICAS', 2) %>\n",
    )

    data = YamlTemplateParser().parse(path)

    assert data["hosts"] == ["a.example.com", "b.example.com"]
    assert data["replicas"] == 2


def test_parser_renders_unset_variables_as_empty(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("YASH_UNSET_VARIABLE", raising=False)
    path = _write(tmp_path, "token: <%= ENV['YASH_UNSET_VARIABLE'] %>\n")

    assert YamlTemplateParser().parse(path) == {"token": None}


def test_parser_exposes_extra_context(tmp_path: Path) -> None:
    path = _write(tmp_path, "region: <%= region %>\n")

    assert YamlTemplateParser(context={"region": "eu-west-1"}).parse(path) == {
        "region": "eu-west-1"
    }


def test_parser_keeps_jinja_braces_literal(tmp_path: Path) -> None:
    path = _write(tmp_path, "pattern: '{{ name }}'\n")

    assert YamlTemplateParser.perform(path) == {"pattern": "{{ name }}"}


def test_parser_returns_none_for_empty_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "")

    assert YamlTemplateParser().parse(path) is None


def test_parser_wraps_template_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, "host: <%= ENV['HOST' %>\n")

    with pytest.raises(ParseError) as excinfo:
        YamlTemplateParser().parse(path)

    assert excinfo.value.__cause__ is not None


def test_parser_wraps_yaml_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, "production: [unclosed\n")

    with pytest.raises(ParseError):
        YamlTemplateParser().parse(path)


def test_parser_wraps_read_errors(tmp_path: Path) -> None:
    with pytest.raises(ReadError) as excinfo:
        YamlTemplateParser().parse(tmp_path / "missing.yml")

    assert isinstance(excinfo.value, OSError)


def test_parser_rejects_binary_content(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(ReadError):
        YamlTemplateParser().parse(path)


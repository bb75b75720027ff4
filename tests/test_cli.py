# File: tests/test_cli.py
"""Тесты для CLI (`sitemap_reader.cli`) с использованием click.testing.CliRunner.
Проверяют команды `entries`, `summary`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
import sitemap_reader.cli as cli_module
from click.testing import CliRunner
from sitemap_reader.cli import cli


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Без configs/default.yaml в рабочей папке используются значения по умолчанию."""
    monkeypatch.chdir(tmp_path)


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SitemapReader" in result.output


def test_show_config(tmp_path, runner):
    cfg_file = tmp_path / "reader.json"
    cfg_file.write_text(json.dumps({"timeout": 3, "user_agent": "Agent/1.0"}), encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["timeout"] == 3.0
    assert data["user_agent"] == "Agent/1.0"


def test_bad_config(tmp_path, runner):
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text("timeout: -5", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_entries_stdout(runner, sitemap_file):
    result = runner.invoke(cli, ["entries", str(sitemap_file)])
    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert [e["location"] for e in output] == [
        "https://example.com/",
        "https://example.com/about",
        "https://example.com/blog",
    ]
    assert output[0]["change_frequency"] == "daily"


def test_entries_reverse(runner, sitemap_file):
    result = runner.invoke(cli, ["entries", "--reverse", str(sitemap_file)])
    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output[0]["location"] == "https://example.com/blog"


def test_entries_skips_bad_entries(tmp_path, runner, make_sitemap):
    path = tmp_path / "bad.xml"
    path.write_text(
        make_sitemap("<loc>A</loc><loc>B</loc>", "<lastmod>x</lastmod>", "<loc>C</loc>"),
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["entries", str(path)])
    assert result.exit_code == 0
    assert [e["location"] for e in json.loads(result.stdout)] == ["C"]
    assert "Multiple <loc> in entry." in result.output


def test_entries_json_file(tmp_path, runner, sitemap_file):
    out = tmp_path / "out.json"
    result = runner.invoke(cli, ["entries", str(sitemap_file), "--json", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["total"] == 3


def test_entries_html_file(tmp_path, runner, sitemap_file):
    out = tmp_path / "report.html"
    result = runner.invoke(cli, ["entries", str(sitemap_file), "--html", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    assert "https://example.com/blog" in out.read_text(encoding="utf-8")


def test_summary(runner, sitemap_file):
    result = runner.invoke(cli, ["summary", str(sitemap_file)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {
        "total": 3,
        "with_last_modified": 1,
        "with_priority": 2,
        "frequencies": {"daily": 1, "monthly": 1},
    }


def test_not_a_sitemap(tmp_path, runner):
    path = tmp_path / "index.xml"
    path.write_text("<sitemapindex><sitemap><loc>x</loc></sitemap></sitemapindex>", encoding="utf-8")
    result = runner.invoke(cli, ["entries", str(path)])
    assert result.exit_code == 1
    assert "Ошибка разбора sitemap" in result.output


def test_malformed_xml(tmp_path, runner):
    path = tmp_path / "broken.xml"
    path.write_text("<urlset><url>", encoding="utf-8")
    result = runner.invoke(cli, ["summary", str(path)])
    assert result.exit_code == 1
    assert "Invalid XML" in result.output


def test_missing_file(tmp_path, runner):
    result = runner.invoke(cli, ["entries", str(tmp_path / "nope.xml")])
    assert result.exit_code == 1
    assert "Файл не найден" in result.output


def test_entries_from_url(monkeypatch, runner, sample_sitemap):
    """Патчим read_source, чтобы не ходить в сеть."""
    seen = {}

    def fake_read(source, cfg):
        seen["source"] = source
        return sample_sitemap.encode("utf-8")

    monkeypatch.setattr(cli_module, "read_source", fake_read)
    result = runner.invoke(cli, ["entries", "https://example.com/sitemap.xml"])
    assert result.exit_code == 0
    assert seen["source"] == "https://example.com/sitemap.xml"
    assert len(json.loads(result.stdout)) == 3


@pytest.mark.parametrize("extra,indented", [([], False), (["--pretty"], True)])
def test_entries_json_file_pretty(tmp_path, runner, sitemap_file, extra, indented):
    out = tmp_path / "out.json"
    result = runner.invoke(cli, ["entries", str(sitemap_file), "--json", str(out), *extra])
    assert result.exit_code == 0
    text = out.read_text(encoding="utf-8")
    assert ("\n  " in text) is indented
    assert json.loads(text)["summary"]["total"] == 3


def test_entries_json_file_pretty_from_config(tmp_path, runner, sitemap_file):
    cfg_file = tmp_path / "reader.yaml"
    cfg_file.write_text("pretty: true\n", encoding="utf-8")
    out = tmp_path / "out.json"
    result = runner.invoke(cli, ["--config", str(cfg_file), "entries", str(sitemap_file), "--json", str(out)])
    assert result.exit_code == 0
    assert "\n  " in out.read_text(encoding="utf-8")

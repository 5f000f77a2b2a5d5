import json
from pathlib import Path

import pytest

from log_linter.cli import main


@pytest.fixture
def repo(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = tmp_path / "repo"
    root.mkdir()
    (root / "server.py").write_text(
        'slog.Info("Starting server")\n'
        'slog.Info("user password: " + password)\n'
        'slog.Info("server ready")\n',
        encoding="utf-8",
    )
    return root


def test_check_prints_findings_and_fails(repo: Path, capsys):
    code = main(["check", str(repo)])

    out = capsys.readouterr().out.splitlines()
    assert code == 1
    assert out == [
        f"{repo / 'server.py'}:1:11: log message should start with lowercase letter [lowercase-start]",
        f"{repo / 'server.py'}:2:11: log message may contain sensitive data (keyword: password) [sensitive-data]",
    ]


def test_check_clean_tree_passes(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ok.py").write_text('slog.Info("all good")\n', encoding="utf-8")

    assert main(["check", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""


def test_check_json_format(repo: Path, capsys):
    main(["check", "--format", "json", str(repo)])

    payload = json.loads(capsys.readouterr().out)
    assert payload["files_scanned"] == 1
    assert payload["findings_count"] == 2
    assert payload["fixable_count"] == 1
    assert payload["by_rule"] == {"lowercase-start": 1, "sensitive-data": 1}
    assert payload["findings"][0]["fix"]["new_text"] == '"starting server"'


def test_check_fix_rewrites_file(repo: Path):
    main(["check", "--fix", str(repo)])

    assert (repo / "server.py").read_text(encoding="utf-8").startswith('slog.Info("starting server")\n')
    assert main(["check", str(repo)]) == 1


def test_check_uses_config_from_working_directory(repo: Path, tmp_path: Path):
    (tmp_path / ".loglinter.json").write_text(
        json.dumps({"check_lowercase": False, "check_sensitive_data": False}),
        encoding="utf-8",
    )
    assert main(["check", str(repo)]) == 0


def test_check_explicit_bad_config_is_usage_error(repo: Path, tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text("[]", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["check", "--config", str(bad), str(repo)])
    assert exc.value.code == 2


def test_check_missing_path_is_usage_error(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["check", str(tmp_path / "nope")])
    assert exc.value.code == 2


def test_check_writes_report_files(repo: Path, tmp_path: Path, capsys):
    out_dir = tmp_path / "report"

    main(["check", "--output-dir", str(out_dir), str(repo)])

    summary = json.loads((out_dir / "findings.json").read_text(encoding="utf-8"))
    csv_lines = (out_dir / "findings.csv").read_text(encoding="utf-8").splitlines()
    assert summary["findings_count"] == 2
    assert csv_lines[0] == "file_path,line,column,rule,description,fix_text"
    assert len(csv_lines) == 3


def test_init_config(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main(["init-config"]) == 0
    assert json.loads(capsys.readouterr().out)["status"] == "written"
    assert json.loads((tmp_path / ".loglinter.json").read_text(encoding="utf-8"))["check_lowercase"] is True

    with pytest.raises(SystemExit):
        main(["init-config"])


def test_check_non_utf8_config_is_usage_error(repo: Path, tmp_path: Path):
    bad = tmp_path / "latin1.json"
    bad.write_bytes(b'{"sensitive_keywords": ["caf\xe9"]}')

    with pytest.raises(SystemExit) as exc:
        main(["check", "--config", str(bad), str(repo)])
    assert exc.value.code == 2


def test_check_fix_keeps_crlf_line_endings(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "win.py"
    target.write_bytes(b'x = 1\r\nslog.Info("Starting")\r\n')

    main(["check", "--fix", str(target)])

    assert target.read_bytes() == b'x = 1\r\nslog.Info("starting")\r\n'

import io

from gpm.infrastructure.config import Settings
from gpm.interface.cli import EXIT_CONFIG, EXIT_NOT_FOUND, EXIT_OK, run


def _run(*argv, settings=None):
    out = io.StringIO()
    code = run(list(argv), settings=settings or Settings(), out=out)
    return code, out.getvalue()


def test_default_command_prints_indexed_repositories(workspace):
    code, output = _run("--root", str(workspace))

    assert code == EXIT_OK
    lines = sorted(output.splitlines())
    assert len(lines) == 2
    assert any(line.endswith("proj1\talice\tgithub.com") for line in lines)
    assert {line.split(":")[0] for line in lines} == {"0", "1"}


def test_source_list(workspace):
    code, output = _run("--root", str(workspace), "source", "list")
    assert code == EXIT_OK
    assert output == "github.com\n"


def test_owner_list_filtered_by_source(workspace, make_repo):
    make_repo(workspace, "gitlab.com/carol/tool")

    _, all_owners = _run("--root", str(workspace), "owner", "list")
    _, gitlab = _run("--root", str(workspace), "owner", "list", "--source", "gitlab.com")

    assert all_owners.splitlines() == ["alice", "bob", "carol"]
    assert gitlab.splitlines() == ["carol"]


def test_repo_list_filtered_by_owner(workspace):
    _, output = _run("--root", str(workspace), "repo", "list", "--owner", "bob")
    assert output == "0:  proj2\tbob\tgithub.com\n"


def test_goto_prints_path(workspace):
    code, output = _run("--root", str(workspace), "goto", "proj2")
    assert code == EXIT_OK
    assert output.strip() == str(workspace / "github.com" / "bob" / "proj2")


def test_goto_unknown_repository(workspace, capsys):
    code, output = _run("--root", str(workspace), "goto", "ghost")
    assert code == EXIT_NOT_FOUND
    assert output == ""
    assert "ghost" in capsys.readouterr().err


def test_root_from_settings(workspace):
    code, output = _run("repo", "list", settings=Settings(workspace_root=str(workspace)))
    assert code == EXIT_OK
    assert len(output.splitlines()) == 2


def test_missing_configuration_exits_with_config_code(capsys):
    code, output = _run("list")
    assert code == EXIT_CONFIG
    assert output == ""
    assert "GOPATH" in capsys.readouterr().err


def test_nonexistent_root_exits_with_config_code(tmp_path):
    code, _ = _run("--root", str(tmp_path / "missing"))
    assert code == EXIT_CONFIG


def test_serve_without_root_exits_with_config_code(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr("gpm.main.serve", lambda *a, **kw: calls.append((a, kw)))

    code, _ = _run("serve")

    assert code == EXIT_CONFIG
    assert calls == []
    assert "GOPATH" in capsys.readouterr().err


def test_serve_runs_over_scanned_catalog(monkeypatch, workspace):
    calls = []
    monkeypatch.setattr("gpm.main.serve", lambda *a, **kw: calls.append((a, kw)))

    code, _ = _run("--root", str(workspace), "--log-level", "debug", "serve")

    assert code == EXIT_OK
    (args, kwargs), = calls
    catalog = args[0]
    assert sorted(r.name for r in catalog.repositories()) == ["proj1", "proj2"]
    assert kwargs == {"log_level": "debug"}

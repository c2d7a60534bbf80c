"""Command line wiring with a scripted VCS selected through the registry."""
import json
from datetime import datetime, timezone

import pytest

from gitcalver import cli
from gitcalver.core.config_manager import CONFIG_FILENAME
from gitcalver.interfaces.vcs_interface import VcsRegistry
from tests.fakes import FakeVcsActions

MAY_2024 = datetime(2024, 5, 20, tzinfo=timezone.utc)


class ScriptedVcs(FakeVcsActions):
    vcs_name = "scripted"
    instances = []

    def __init__(self, repo_path=None):
        super().__init__(repo_path, branch="main", latest_tag="2024.05.3")
        ScriptedVcs.instances.append(self)


@pytest.fixture
def project(tmp_path):
    ScriptedVcs.instances = []
    VcsRegistry.register(ScriptedVcs)
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({
        "vcs": "scripted",
        "variants": ["free", "pro"],
        "version_catalog": "versions.toml",
    }), encoding="utf-8")
    yield tmp_path
    VcsRegistry.unregister("scripted")


def _run(project, *argv):
    args = cli.build_parser().parse_args(["--project-root", str(project), *argv])
    return cli.run(args, MAY_2024)


def test_tag_publishes_configured_variants(project):
    assert _run(project, "tag") == 0
    vcs = ScriptedVcs.instances[-1]
    assert vcs.writes == [("add_tag", "2024.05.4-free"), ("add_tag", "2024.05.4-pro")]


def test_tag_with_variant_and_push_flags(project):
    assert _run(project, "tag", "--variant", "beta", "--push", "--remote", "upstream") == 0
    vcs = ScriptedVcs.instances[-1]
    assert vcs.writes == [("add_tag", "2024.05.4-beta"), ("push_tag", "upstream", "2024.05.4-beta")]


def test_tag_branch_filter_from_command_line(project):
    assert _run(project, "tag", "--branch", "release/.*") == 0
    assert ScriptedVcs.instances[-1].writes == []


def test_catalog_publishes_configured_file(project):
    assert _run(project, "catalog") == 0
    vcs = ScriptedVcs.instances[-1]
    assert vcs.writes == [("commit_file", "versions.toml", "Version: 2024.05.1")]
    assert (project / "versions.toml").exists()


def test_show_prints_next_version(project, capsys):
    assert _run(project, "show") == 0
    assert capsys.readouterr().out.strip() == "2024.05.4"
    assert ScriptedVcs.instances[-1].writes == []


def test_main_reports_errors_with_exit_status(tmp_path):
    assert cli.main(["--project-root", str(tmp_path), "catalog"]) == 1


def test_unknown_vcs_is_reported(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"vcs": "svn"}), encoding="utf-8")
    assert cli.main(["--project-root", str(tmp_path), "show"]) == 1


def test_invalid_branch_pattern_is_reported(project):
    assert cli.main(["--project-root", str(project), "tag", "--branch", "release/(*"]) == 1
    assert ScriptedVcs.instances[-1].writes == []


def test_git_outside_repository_is_reported(tmp_path, caplog):
    assert cli.main(["--project-root", str(tmp_path), "show"]) == 1
    assert "Not a git repository" in caplog.text

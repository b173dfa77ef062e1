from pathlib import Path

import pytest

import jw.commands.remove as remove_cmd
from jw.errors import CannotRemoveDefaultWorkspaceError
from tests.jw.helpers import FakeJj, make_linked_workspace, make_repo


def test_removes_directory_and_forgets(tmp_path: Path) -> None:
    repo = make_repo(tmp_path)
    feat = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
    runner = FakeJj(repo)
    runner.register("feat", feat)

    remove_cmd.remove_workspace("feat", cwd=repo, runner=runner)

    assert not feat.exists()
    assert runner.jj_calls == [["workspace", "forget", "feat"]]
    assert "feat" not in runner.workspaces


def test_default_is_refused_before_any_call(tmp_path: Path) -> None:
    repo = make_repo(tmp_path)
    runner = FakeJj(repo)

    with pytest.raises(CannotRemoveDefaultWorkspaceError):
        remove_cmd.remove_workspace("default", cwd=repo, runner=runner)

    assert runner.requests == []
    assert repo.exists()


def test_forget_failure_still_removes_directory(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    repo = make_repo(tmp_path)
    feat = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
    runner = FakeJj(repo)

    remove_cmd.remove_workspace("feat", cwd=repo, runner=runner)

    assert not feat.exists()
    assert "Failed to run jj workspace forget: Error: No such workspace: feat" in (
        capsys.readouterr().err
    )


def test_missing_directory_is_not_an_error(tmp_path: Path) -> None:
    repo = make_repo(tmp_path)
    runner = FakeJj(repo)
    runner.register("gone", tmp_path / "repo-workspaces" / "gone")

    remove_cmd.remove_workspace("gone", cwd=repo, runner=runner)

    assert "gone" not in runner.workspaces

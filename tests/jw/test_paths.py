import os
from pathlib import Path

import pytest

import jw.paths as paths
from jw.errors import NotARepositoryError, RepoMarkerError
from tests.jw.helpers import make_linked_workspace, make_repo


class TestNormalizeWorkspaceName:
    def test_replaces_every_separator(self) -> None:
        assert paths.normalize_workspace_name("feature/auth/login") == "feature-auth-login"

    def test_edge_cases(self) -> None:
        assert paths.normalize_workspace_name("") == ""
        assert paths.normalize_workspace_name("///") == "---"

    def test_keeps_case_and_whitespace(self) -> None:
        assert paths.normalize_workspace_name(" Feature/X ") == " Feature-X "


class TestFindRepoRoot:
    def test_returns_start_when_it_holds_marker(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        assert paths.find_repo_root(repo) == repo

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        nested = repo / "src" / "pkg"
        nested.mkdir(parents=True)
        assert paths.find_repo_root(nested) == repo

    def test_prefers_nearest_marker(self, tmp_path: Path) -> None:
        outer = make_repo(tmp_path, "outer")
        inner = make_repo(outer, "inner")
        assert paths.find_repo_root(inner / ".jj") == inner

    def test_raises_outside_repository(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepositoryError):
            paths.find_repo_root(tmp_path)


class TestInspectMarker:
    def test_directory_marker_is_default_location(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        location = paths.inspect_marker(repo)
        assert location == paths.DefaultLocation(root=repo)
        assert location.default_root == repo

    def test_file_marker_is_linked_location(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        other = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
        location = paths.inspect_marker(other)
        assert isinstance(location, paths.LinkedLocation)
        assert location.pointer == str(repo / ".jj" / "repo")
        assert location.default_root == repo

    def test_relative_pointer_resolves_against_jj_dir(self, tmp_path: Path) -> None:
        location = paths.LinkedLocation(
            root=tmp_path / "repo-workspaces" / "feat",
            pointer="../../../repo/.jj/repo",
        )
        assert location.default_root == tmp_path / "repo"

    def test_missing_marker_raises(self, tmp_path: Path) -> None:
        (tmp_path / "repo" / ".jj").mkdir(parents=True)
        with pytest.raises(RepoMarkerError):
            paths.inspect_marker(tmp_path / "repo")

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_unexpected_marker_kind_raises(self, tmp_path: Path) -> None:
        (tmp_path / "repo" / ".jj").mkdir(parents=True)
        os.mkfifo(tmp_path / "repo" / ".jj" / "repo")
        with pytest.raises(RepoMarkerError):
            paths.inspect_marker(tmp_path / "repo")


class TestDefaultRootResolution:
    def test_from_default_workspace(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        assert paths.resolve_default_root(repo) == repo

    def test_from_secondary_workspace(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        other = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
        (other / "docs").mkdir()
        assert paths.resolve_default_root(other / "docs") == repo

    def test_current_workspace_name(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        other = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
        assert paths.current_workspace_name(repo) == paths.DEFAULT_WORKSPACE_NAME
        assert paths.current_workspace_name(other) == "feat"


class TestWorkspacesDir:
    def test_dir_name_suffix_variants(self) -> None:
        assert paths.workspaces_dir_name("my-repo", None) == "my-repo-workspaces"
        assert paths.workspaces_dir_name("my-repo", "-ws") == "my-repo-ws"
        assert paths.workspaces_dir_name("my-repo", "__ws") == "my-repo__ws"
        assert paths.workspaces_dir_name("my-repo", "") == "my-repo"

    def test_workspaces_dir_is_sibling_of_default_root(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        other = make_linked_workspace(repo, tmp_path / "repo-workspaces" / "feat")
        assert paths.workspaces_dir(other) == tmp_path / "repo-workspaces"
        assert paths.workspaces_dir(repo, "__ws") == tmp_path / "repo__ws"

    def test_empty_suffix_collapses_next_to_repo(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        assert paths.workspace_path(repo, "feat", "") == tmp_path / "repo" / "feat"

    def test_workspace_path_normalizes_name(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path)
        assert paths.workspace_path(repo, "feature/x") == (
            tmp_path / "repo-workspaces" / "feature-x"
        )

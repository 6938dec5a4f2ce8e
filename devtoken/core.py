"""
Core devtoken functionality - project detection and git worktree discovery.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import git
from git import Git

API_CLIENT_PATH = 'src/lib/api-client.ts'
UTILS_PATH = 'src/lib/utils.ts'

# Only UI worktrees carry the api client
MARKER_FILE = API_CLIENT_PATH

ENVIRONMENTS = ('dev', 'qa', 'prod')


class DevTokenError(Exception):
    """Base exception for devtoken operations."""
    pass


class NotProjectRootError(DevTokenError):
    """Raised when the current directory is not a UI worktree."""
    pass


class DiscoveryError(DevTokenError):
    """Raised when git worktrees cannot be listed."""
    pass


class NoWorktreesError(DiscoveryError):
    """Raised when git reports no worktrees at all."""
    pass


class WorktreeNotFoundError(DevTokenError):
    """Raised when a requested worktree is not among the discovered ones."""
    pass


class PatchFileNotFoundError(DevTokenError):
    """Raised when a file to patch does not exist in the worktree."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File not found: {path}")


class PatternNotFoundError(DevTokenError):
    """Raised when the expected source pattern is missing from a file."""

    def __init__(self, description: str, path: Optional[Path] = None):
        self.description = description
        self.path = path
        message = f"Could not find {description} pattern"
        if path is not None:
            message += f" in {path}"
        super().__init__(message)


@dataclass
class Worktree:
    """A git worktree as listed by `git worktree list`."""
    path: str
    name: str


def worktree_name(path: str) -> str:
    """Last path segment, or the whole path when that segment is empty."""
    return path.split('/')[-1] or path


def check_project_root(directory: Union[str, Path]) -> Path:
    """Ensure directory is a UI worktree, returning the marker file path."""
    marker = Path(directory) / MARKER_FILE
    if not marker.exists():
        raise NotProjectRootError(
            "Not a UI repository. Please run from a UI worktree.\n"
            f"   Expected file not found: {MARKER_FILE}"
        )
    return marker


def parse_worktree_list(output: str) -> List[Worktree]:
    """Parse `git worktree list` output into Worktree records."""
    worktrees = []
    for line in output.split('\n'):
        fields = line.split()
        if not fields:
            continue

        path = fields[0]
        worktrees.append(Worktree(path=path, name=worktree_name(path)))

    return worktrees


def sort_worktrees(worktrees: List[Worktree], current_path: Union[str, Path]) -> List[Worktree]:
    """Move the worktree at current_path to the front, keeping the rest in order."""
    current = Path(current_path).resolve()
    return sorted(worktrees, key=lambda wt: Path(wt.path).resolve() != current)


def find_worktree(worktrees: List[Worktree], wanted: str) -> Worktree:
    """Find a worktree by path or by name."""
    wanted_path = Path(wanted).resolve()
    for worktree in worktrees:
        if Path(worktree.path).resolve() == wanted_path:
            return worktree

    for worktree in worktrees:
        if worktree.name == wanted:
            return worktree

    available = ', '.join(wt.name for wt in worktrees)
    raise WorktreeNotFoundError(f"No worktree matching '{wanted}' (available: {available})")


class WorktreeRepo:
    """Wrapper around the git command line for worktree discovery."""

    def __init__(self, repo_path: Optional[Union[str, Path]] = None):
        """Initialize with repository path (defaults to current directory)."""
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()

    def toplevel(self) -> str:
        """Top-level directory of the repository containing repo_path."""
        try:
            output = Git(str(self.repo_path)).rev_parse('--show-toplevel')
        except git.exc.GitError as e:
            raise DiscoveryError(f"Not a Git repository: {self.repo_path} ({e})") from e
        return output.strip()

    def list_worktrees(self) -> List[Worktree]:
        """Get all worktrees of the repository, in git's order."""
        root = self.toplevel()
        try:
            output = Git(root).worktree('list')
        except git.exc.GitError as e:
            raise DiscoveryError(f"Failed to list worktrees: {e}") from e

        worktrees = parse_worktree_list(output)
        if not worktrees:
            raise NoWorktreesError("No worktrees found")
        return worktrees

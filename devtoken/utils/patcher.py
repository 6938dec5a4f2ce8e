"""
Regex based patching of the UI source files that hold the dev token and environment.
"""

import re
from pathlib import Path
from typing import List, Union

from devtoken.core import (
    API_CLIENT_PATH,
    ENVIRONMENTS,
    UTILS_PATH,
    DevTokenError,
    PatchFileNotFoundError,
    PatternNotFoundError,
)

# config.headers.Authorization = `Bearer <token>`;
BEARER_PATTERN = re.compile(
    r"(config\.headers\.Authorization\s*=\s*`Bearer\s+)[^`]+(`;)"
)

# if (hostname.startsWith("localhost")) { return "<env>"; }
ENVIRONMENT_PATTERN = re.compile(
    r"(if\s*\(\s*hostname\.startsWith\s*\(\s*[\"']localhost[\"']\s*\)\s*\)"
    r"\s*\{\s*return\s+[\"'])(dev|qa|prod)([\"'];)"
)


def replace_bearer_token(content: str, token: str) -> str:
    """Replace the bearer token in the Authorization header assignment."""
    match = BEARER_PATTERN.search(content)
    if not match:
        raise PatternNotFoundError('Bearer token')

    return content[:match.start()] + match.group(1) + token + match.group(2) + content[match.end():]


def replace_environment(content: str, environment: str) -> str:
    """Replace the environment returned for localhost."""
    if environment not in ENVIRONMENTS:
        raise DevTokenError(
            f"Unknown environment '{environment}' (expected one of: {', '.join(ENVIRONMENTS)})"
        )

    match = ENVIRONMENT_PATTERN.search(content)
    if not match:
        raise PatternNotFoundError('localhost environment')

    return content[:match.start()] + match.group(1) + environment + match.group(3) + content[match.end():]


def _patch_file(file_path: Path, replace, value: str, dry_run: bool = False, verbose: bool = False) -> Path:
    if not file_path.exists():
        raise PatchFileNotFoundError(file_path)

    if verbose:
        print(f"Reading {file_path}")
    content = file_path.read_text(encoding='utf-8')

    try:
        updated = replace(content, value)
    except PatternNotFoundError as e:
        raise PatternNotFoundError(e.description, file_path) from e

    if not dry_run:
        file_path.write_text(updated, encoding='utf-8')
    return file_path


def update_api_client(
    worktree_path: Union[str, Path],
    token: str,
    dry_run: bool = False,
    verbose: bool = False
) -> Path:
    """Write token into the worktree's api client."""
    return _patch_file(Path(worktree_path) / API_CLIENT_PATH, replace_bearer_token, token, dry_run, verbose)


def update_utils(
    worktree_path: Union[str, Path],
    environment: str,
    dry_run: bool = False,
    verbose: bool = False
) -> Path:
    """Write environment into the worktree's utils module."""
    return _patch_file(Path(worktree_path) / UTILS_PATH, replace_environment, environment, dry_run, verbose)


def update_files(
    worktree_path: Union[str, Path],
    token: str,
    environment: str,
    dry_run: bool = False,
    verbose: bool = False
) -> List[Path]:
    """Update api client then utils; stops at the first failure without rollback."""
    if verbose:
        print(f"Patching {API_CLIENT_PATH} and {UTILS_PATH} in {worktree_path}")

    updated = []
    for update, value in ((update_api_client, token), (update_utils, environment)):
        path = update(worktree_path, value, dry_run, verbose)
        if dry_run:
            print(f"Would update {path}")
        else:
            print(f"✓ Updated {path}")
        updated.append(path)
    return updated

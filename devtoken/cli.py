"""
CLI interface for devtoken.
"""

import sys
import argparse
from pathlib import Path
from typing import Optional, List

from . import __version__
from .core import (
    ENVIRONMENTS,
    DevTokenError,
    WorktreeRepo,
    check_project_root,
    find_worktree,
    sort_worktrees,
)
from .prompts import PromptCancelled, environment_choices, prompt_token, select_option
from .utils.patcher import update_files


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='devtoken',
        description='Write a JWT token and environment into a UI worktree'
    )

    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show what would be done without actually doing it'
    )

    parser.add_argument('token', nargs='?', help='JWT token (prompted for when omitted)')
    parser.add_argument('--env', choices=ENVIRONMENTS, help='Environment to select for localhost')
    parser.add_argument('--worktree', help='Path or name of the worktree to update')

    return parser


def resolve_token(token_arg: Optional[str]) -> str:
    """Use the command-line token when given, otherwise prompt for one."""
    token = (token_arg or '').strip()
    return token or prompt_token()


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    if args is None:
        args = sys.argv[1:]

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        return run(parsed_args)

    except PromptCancelled:
        print("\n👋 Cancelled")
        return 0
    except DevTokenError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"❌ Unexpected error: {e}", file=sys.stderr)
        return 1


def run(args: argparse.Namespace) -> int:
    """Validate the directory, collect input and patch the chosen worktree."""
    current_path = Path.cwd().resolve()

    check_project_root(current_path)
    print("✓ UI repository detected\n")

    token = resolve_token(args.token)

    repo = WorktreeRepo(current_path)
    if args.verbose:
        print(f"Repository top level: {repo.toplevel()}")

    worktrees = repo.list_worktrees()
    if args.verbose:
        print(f"Found {len(worktrees)} worktree(s)")

    worktrees = sort_worktrees(worktrees, current_path)

    if args.worktree:
        worktree_path = find_worktree(worktrees, args.worktree).path
    else:
        worktree_path = select_option(
            "Select worktree:",
            [(wt.name, wt.path) for wt in worktrees]
        )

    environment = args.env or select_option(
        "Select environment:",
        environment_choices(ENVIRONMENTS)
    )

    update_files(worktree_path, token, environment, dry_run=args.dry_run, verbose=args.verbose)

    if args.dry_run:
        print("\nDry run - no changes made")
    else:
        print("\n✓ Token and environment updated successfully!")
    print(f"  Worktree: {worktree_path}")
    print(f"  Environment: {environment}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

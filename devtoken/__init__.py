"""
devtoken - point a local UI worktree at an environment with a dev JWT.

devtoken picks one of the repository's git worktrees and rewrites the
bearer token in src/lib/api-client.ts and the localhost environment in
src/lib/utils.ts.
"""

__version__ = "0.1.0"
__author__ = "devtoken"

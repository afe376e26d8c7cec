from __future__ import annotations

import os
import subprocess
from typing import List, Optional, Tuple

from sfdxpackage.domain.schemas.diff import DiffEntry
from sfdxpackage.exceptions.errors import GitError


def _run_git(args: List[str], cwd: Optional[str] = None, timeout: int = 60) -> Tuple[int, str, str]:
    """
    Returns (returncode, stdout, stderr)
    """
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            shell=False,
        )
    except FileNotFoundError as e:
        raise GitError(f"git executable not found: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {' '.join(args)} timed out after {timeout}s") from e
    return proc.returncode, proc.stdout, proc.stderr


def get_name_status(
    compare: str,
    branch: str,
    *,
    repo_path: Optional[str] = None,
    timeout: int = 60,
) -> str:
    """
    Runs `git --no-pager diff --name-status <compare> <branch>` in repo_path
    (default: current directory).

    Any output on stderr is treated as a failure, even with a zero exit code.
    """
    cwd = str(repo_path) if repo_path else os.getcwd()
    args = ["--no-pager", "diff", "--name-status", compare, branch]

    code, out, err = _run_git(args, cwd=cwd, timeout=timeout)
    if code != 0 or (err or "").strip():
        raise GitError(f"git diff failed: {(err or '').strip() or f'exit code {code}'}")
    return out or ""


def parse_name_status_line(line: str) -> Optional[DiffEntry]:
    """
    `git diff --name-status` line format:
      <status>\t<path>
      <status>\t<old path>\t<new path>   (renames, copies)
    """
    line = (line or "").rstrip("\r\n")
    if not line.strip():
        return None

    parts = line.split("\t")
    if len(parts) >= 2:
        return DiffEntry(status=parts[0].strip(), path=parts[-1].strip())

    # no tab: first character is the status, the rest is the path
    return DiffEntry(status=line[:1], path=line[1:].strip())


def parse_name_status(text: str) -> List[DiffEntry]:
    entries: List[DiffEntry] = []
    for line in (text or "").splitlines():
        entry = parse_name_status_line(line)
        if entry is not None:
            entries.append(entry)
    return entries

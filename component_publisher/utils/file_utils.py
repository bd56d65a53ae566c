"""File operation utilities"""

import fnmatch
import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def read_json(file_path: Path) -> Dict[str, Any]:
    """
    Read a JSON object from file

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed dictionary

    Raises:
        ValueError: If the file does not contain a JSON object
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}")

    return data


def write_json(file_path: Path, data: Dict[str, Any]) -> None:
    """Write dictionary as indented JSON"""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def copy_tree(source: Path,
              destination: Path,
              exclude_patterns: Optional[List[str]] = None) -> int:
    """
    Copy a directory tree, replacing the destination

    Args:
        source: Source directory
        destination: Destination directory (removed first if present)
        exclude_patterns: Names or glob patterns to skip at any depth

    Returns:
        Number of files copied
    """
    exclude_patterns = exclude_patterns or []

    def ignore(directory: str, names: List[str]) -> List[str]:
        return [
            name for name in names
            if any(fnmatch.fnmatch(name, pattern) for pattern in exclude_patterns)
        ]

    if destination.exists():
        shutil.rmtree(destination)

    shutil.copytree(source, destination, ignore=ignore)

    return sum(1 for p in destination.rglob('*') if p.is_file())


def remove_file(file_path: Path) -> bool:
    """
    Remove a file, tolerating a missing one

    Args:
        file_path: File to remove

    Returns:
        True if a file was removed, False if it did not exist

    Raises:
        OSError: If the file exists but cannot be removed
    """
    try:
        file_path.unlink()
        return True
    except FileNotFoundError:
        return False

"""
File Utilities Module
Common file operations and path handling functions.
"""

import os
from pathlib import Path
from typing import List

CSS_EXTENSIONS = ['.css']


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    return path.name.startswith('.')


def get_all_files_by_extension(path: str | Path, extensions: List[str]) -> List[Path]:
    """
    Recursively collect all files with specified extensions.

    Args:
        path: Base directory path
        extensions: List of file extensions to collect (e.g., ['.css'])

    Returns:
        Sorted list of Path objects for matching files
    """
    base_path = normalize_path(path)
    matching_files = []

    # Convert extensions to lowercase for case-insensitive matching
    extensions = [ext.lower() for ext in extensions]

    for root, dirs, files in os.walk(base_path):
        # Skip hidden directories
        dirs[:] = [d for d in dirs if not is_hidden(Path(root) / d)]

        for file in files:
            file_path = Path(root) / file
            if is_hidden(file_path):
                continue
            if any(file.lower().endswith(ext) for ext in extensions):
                matching_files.append(file_path)

    return sorted(matching_files)


def expand_css_paths(paths: List[str | Path]) -> List[Path]:
    """Expand directories into the CSS files beneath them; files pass through."""
    expanded = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            expanded.extend(get_all_files_by_extension(path, CSS_EXTENSIONS))
        else:
            expanded.append(path)
    return expanded


def ensure_directory(directory: Path) -> None:
    """Ensure directory exists, create if necessary."""
    directory.mkdir(parents=True, exist_ok=True)


def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()


def write_file_content(file_path: Path, data: str) -> None:
    """Write text to a file, creating parent directories as needed."""
    ensure_directory(Path(file_path).parent)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(data)

"""Git diff filtering and size guard.

Contains:
- DEFAULT_DIFF_EXCLUDE_PATTERNS: Lock, binary and generated files kept out of prompts
- _should_exclude_file: Check if a file should be excluded based on patterns
- filter_diff_files: Drop excluded files from a changed-file list
- truncate_diff: Cap a diff at a character budget
"""

import fnmatch
from pathlib import Path

# Files whose diffs add size but no useful signal for commit planning.
# They still appear in the status snapshot and can be planned into commits.
DEFAULT_DIFF_EXCLUDE_PATTERNS = [
    # Lock files
    "poetry.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
    # Binary assets
    "*.png", "*.jpg", "*.jpeg", "*.gif", "*.bmp", "*.ico", "*.svg", "*.webp",
    "*.pdf", "*.zip", "*.gz", "*.tar", "*.7z", "*.rar",
    "*.bin", "*.exe", "*.dll", "*.so", "*.dylib", "*.a", "*.o",
    "*.wasm", "*.pyc", "*.class", "*.jar", "*.war",
    "*.mp3", "*.mp4", "*.avi", "*.mov", "*.wav", "*.flac",
    "*.ttf", "*.woff", "*.woff2", "*.eot",
    "*.db", "*.sqlite", "*.sqlite3",
    # Generated output
    "dist/*",
    "build/*",
    "node_modules/*",
    "vendor/*",
    "*.min.js",
    "*.min.css",
]

TRUNCATION_MARKER = "\n\n... (Diff truncated due to extreme size)"


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports glob patterns like *.lock, build/*, etc. Matching is
    case-insensitive so that IMAGE.PNG is treated like image.png.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    lowered = filename.lower()
    for pattern in patterns:
        pattern = pattern.lower()
        # Handle exact matches
        if lowered == pattern:
            return True
        # Handle glob patterns
        if fnmatch.fnmatch(lowered, pattern):
            return True
        # Handle patterns that might match the basename
        if fnmatch.fnmatch(Path(lowered).name, pattern):
            return True
        # Directory patterns match at any depth (src/dist/x.js)
        if pattern.endswith("/*") and f"/{pattern[:-1]}" in f"/{lowered}":
            return True
    return False


def filter_diff_files(files: list[str], patterns: list[str] | None = None) -> list[str]:
    """Return the files whose diffs should be sent to the model.

    Args:
        files: Changed file paths.
        patterns: Exclude patterns (defaults to DEFAULT_DIFF_EXCLUDE_PATTERNS).

    Returns:
        The files not matching any exclude pattern, in input order.
    """
    if patterns is None:
        patterns = DEFAULT_DIFF_EXCLUDE_PATTERNS
    return [f for f in files if not _should_exclude_file(f, patterns)]


def truncate_diff(diff: str, max_chars: int) -> tuple[str, bool]:
    """Cap a diff at max_chars characters.

    Args:
        diff: The diff text.
        max_chars: Character budget.

    Returns:
        Tuple of (possibly truncated diff, whether truncation happened).
    """
    if len(diff) <= max_chars:
        return diff, False
    return diff[:max_chars] + TRUNCATION_MARKER, True

"""Git status parsing.

Contains:
- unquote_path: Undo git's C-style quoting of a path
- files_from_status_porcelain: Changed-file set from `git status --porcelain`
"""

_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "f": b"\f",
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "v": b"\v",
    '"': b'"',
    "\\": b"\\",
}


def unquote_path(path: str) -> str:
    """Undo the quoting git applies to unusual paths.

    git wraps paths containing spaces, quotes, control or non-ASCII
    characters in double quotes, with backslash escapes and octal-escaped
    UTF-8 bytes ("caf\\303\\251.txt"). Unquoted paths are returned as is.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\" or i + 1 == len(body):
            out.extend(char.encode("utf-8"))
            i += 1
            continue

        nxt = body[i + 1]
        octal = body[i + 1:i + 4]
        if len(octal) == 3 and all(c in "01234567" for c in octal):
            out.append(int(octal, 8))
            i += 4
        elif nxt in _ESCAPES:
            out.extend(_ESCAPES[nxt])
            i += 2
        else:
            out.extend(("\\" + nxt).encode("utf-8"))
            i += 2

    return out.decode("utf-8", errors="replace")


def files_from_status_porcelain(status: str) -> list[str]:
    """Parse porcelain v1 status output into a sorted list of changed paths.

    Lines look like "XY path" or "XY old -> new"; for renames the new path
    is used. Quoted paths are unquoted. Branch header lines ("## ...") and
    lines too short to carry a path are skipped.

    Args:
        status: Raw `git status --porcelain` output.

    Returns:
        Sorted, de-duplicated list of changed file paths.
    """
    files = set()
    for line in status.splitlines():
        line = line.rstrip()
        if len(line) < 4 or line.startswith("##"):
            continue

        rest = line[2:].strip()
        if " -> " in rest:
            _old, new = rest.split(" -> ", 1)
            rest = new.strip()
        files.add(unquote_path(rest))

    return sorted(files)

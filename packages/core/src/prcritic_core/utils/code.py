import fnmatch

DELETED_STATUSES = {"removed", "deleted"}


def is_code_file(file_name: str, extensions) -> bool:
    return any(file_name.endswith(ext) for ext in extensions)


def is_excluded(filename: str, patterns: list[str]) -> bool:
    """Return True if filename matches any exclude pattern.

    Supports:
    - fnmatch globs on the full path: "src/generated/*.py"
    - fnmatch globs on the basename: "*.min.js"
    - Directory names/prefixes: "migrations/", "tests" (matches any file within that tree)
    """
    for pattern in patterns:
        if fnmatch.fnmatch(filename, pattern):
            return True
        if fnmatch.fnmatch(filename.rsplit("/", 1)[-1], pattern):
            return True
        prefix = pattern.rstrip("/") + "/"
        if filename.startswith(prefix) or ("/" + prefix) in filename:
            return True
    return False


def skip_reason(file, extensions, exclude_patterns: list[str]) -> str | None:
    """Return why ``file`` must not be reviewed, or None if it should be."""
    if not file.filename:
        return "no filename"
    if file.status in DELETED_STATUSES:
        return "deleted"
    if not is_code_file(file.filename, extensions):
        return "not a source file"
    if is_excluded(file.filename, exclude_patterns):
        return "excluded"
    return None


def truncate(text: str, max_chars: int, label: str) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + f"\n... [{label} truncated]"
    return text

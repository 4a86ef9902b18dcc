import re

from pinegrow_razor.models import FileKind, ProjectFile


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    index = 0
    while index < len(pattern):
        if pattern.startswith("**/", index):
            parts.append("(?:.*/)?")
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            index += 2
        elif pattern[index] == "*":
            parts.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            parts.append("[^/]")
            index += 1
        else:
            parts.append(re.escape(pattern[index]))
            index += 1
    return re.compile("".join(parts) + r"\Z")


class InMemoryProjectFiles:
    """Dictionary-backed ``ProjectFiles`` implementation.

    ``sources`` maps POSIX paths to text, or to bytes for binary files;
    everything written ends up in ``written``.
    """

    def __init__(self, sources: dict[str, str | bytes] | None = None) -> None:
        self.sources: dict[str, str | bytes] = dict(sources or {})
        self.written: dict[str, str] = {}

    def find_files(self, patterns: list[str]) -> list[ProjectFile]:
        matchers = [_glob_to_regex(pattern.removeprefix("./")) for pattern in patterns]
        found: list[ProjectFile] = []
        for path in sorted(self.sources):
            if any(matcher.match(path) for matcher in matchers):
                kind = FileKind.BINARY if isinstance(self.sources[path], bytes) else FileKind.TEXT
                found.append(ProjectFile(path=path, kind=kind))
        return found

    def read_text(self, path: str) -> str | None:
        content = self.sources.get(path)
        return content if isinstance(content, str) else None

    def write_file(self, path: str, content: str) -> None:
        self.written[path] = content

from pathlib import Path

from pinegrow_razor.models import FileKind, ProjectFile

_SNIFF_BYTES = 8192


def _detect_kind(path: Path) -> FileKind:
    with path.open("rb") as handle:
        chunk = handle.read(_SNIFF_BYTES)
    return FileKind.BINARY if b"\0" in chunk else FileKind.TEXT


class LocalProjectFiles:
    """Read Pinegrow sources below ``root`` and write generated templates below ``output``.

    Implements the ``ProjectFiles`` protocol. Paths are POSIX strings relative
    to the respective root.
    """

    def __init__(self, root: str | Path, output: str | Path | None = None) -> None:
        self.root = Path(root)
        self.output = Path(output) if output is not None else self.root

    def find_files(self, patterns: list[str]) -> list[ProjectFile]:
        found: dict[str, ProjectFile] = {}
        for pattern in patterns:
            for path in sorted(self.root.glob(pattern)):
                if not path.is_file():
                    continue
                relative = path.relative_to(self.root).as_posix()
                if relative not in found:
                    found[relative] = ProjectFile(path=relative, kind=_detect_kind(path))
        return list(found.values())

    def read_text(self, path: str) -> str | None:
        try:
            return (self.root / path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def write_file(self, path: str, content: str) -> None:
        target = self.output / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

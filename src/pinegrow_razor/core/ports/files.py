from typing import Protocol

from pinegrow_razor.models import ProjectFile


class ProjectFiles(Protocol):
    def find_files(self, patterns: list[str]) -> list[ProjectFile]: ...

    def read_text(self, path: str) -> str | None: ...

    def write_file(self, path: str, content: str) -> None: ...

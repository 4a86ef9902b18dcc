from pinegrow_razor.files.local import LocalProjectFiles
from pinegrow_razor.files.memory import InMemoryProjectFiles

__all__ = [
    "InMemoryProjectFiles",
    "LocalProjectFiles",
]

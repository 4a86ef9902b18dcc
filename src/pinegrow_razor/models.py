from enum import Enum

from pydantic import BaseModel


class FileKind(str, Enum):
    TEXT = "text"
    BINARY = "binary"


class ProjectFile(BaseModel):
    path: str
    kind: FileKind = FileKind.TEXT


class OutputArtifact(BaseModel):
    path: str
    content: str


class ComponentSummary(BaseModel):
    name: str
    path: str
    parameters: list[str]

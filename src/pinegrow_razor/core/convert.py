import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from pinegrow_razor.config import ConverterConfig
from pinegrow_razor.core.documents import convert_document
from pinegrow_razor.core.markup import MarkupError
from pinegrow_razor.core.ports.files import ProjectFiles
from pinegrow_razor.models import FileKind, OutputArtifact

logger = logging.getLogger(__name__)

PROJECT_MARKER = "pinegrow.json"
DOCUMENT_PATTERN = "**/*.html"


@dataclass
class ConversionReport:
    artifacts: list[OutputArtifact] = field(default_factory=list)
    converted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def find_projects(files: ProjectFiles) -> list[str]:
    """Return the directory of every ``pinegrow.json`` marker."""
    return [str(PurePosixPath(marker.path).parent) for marker in files.find_files([f"**/{PROJECT_MARKER}"])]


def _relative(path: str, project: str) -> str:
    if project in ("", "."):
        return path
    return str(PurePosixPath(path).relative_to(project))


def run_conversion(files: ProjectFiles, config: ConverterConfig, *, write: bool = True) -> ConversionReport:
    """Convert every HTML document of every Pinegrow project reachable through ``files``.

    Binary, unreadable and unparsable documents are skipped. Errors raised by
    ``files`` while writing are not caught.
    """
    report = ConversionReport()
    for project in find_projects(files):
        pattern = str(PurePosixPath(project) / DOCUMENT_PATTERN)
        for document in files.find_files([pattern]):
            if document.kind is not FileKind.TEXT:
                logger.debug("Skipping binary file %s", document.path)
                report.skipped.append(document.path)
                continue

            text = files.read_text(document.path)
            if text is None:
                logger.info("Skipping unreadable file %s", document.path)
                report.skipped.append(document.path)
                continue

            try:
                result = convert_document(text, _relative(document.path, project), config)
            except MarkupError as exc:
                logger.info("Skipping %s: %s", document.path, exc)
                report.skipped.append(document.path)
                continue

            if write:
                for artifact in result.artifacts:
                    files.write_file(artifact.path, artifact.content)
            report.artifacts.extend(result.artifacts)
            report.converted.append(document.path)
    return report

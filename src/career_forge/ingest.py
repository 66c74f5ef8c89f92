# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Handles intake of resume files (validation, text extraction) and
ingestion of job descriptions from URLs or local documents.
"""

import asyncio
import io
import mimetypes
import os
import logging
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup
from docx import Document
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from career_forge.config import Settings
from career_forge.errors import (
    CorruptFileError,
    ExtractionError,
    UnsupportedFormatError,
    ValidationError,
)
from career_forge.samples import SAMPLE_PDF_TRANSCRIPT, SAMPLE_WORD_TRANSCRIPT

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024

PDF_TYPE = "application/pdf"
DOC_TYPE = "application/msword"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_TYPE = "text/plain"

ALLOWED_TYPES = (PDF_TYPE, DOC_TYPE, DOCX_TYPE, TEXT_TYPE)
ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt")

@dataclass
class ResumeFile:
    """
    A user-selected upload: declared name, MIME type and size, backed by
    either in-memory bytes or a path on disk.
    """
    name: str
    type: str
    size: int
    content: Optional[bytes] = None
    path: Optional[str] = None

    @classmethod
    def from_path(cls, path: str) -> "ResumeFile":
        declared, _ = mimetypes.guess_type(path)
        return cls(
            name=os.path.basename(path),
            type=declared or "",
            size=os.path.getsize(path),
            path=path,
        )

    @classmethod
    def from_bytes(cls, name: str, content: bytes, type: str = "") -> "ResumeFile":
        return cls(name=name, type=type, size=len(content), content=content)

    @property
    def suffix(self) -> str:
        return os.path.splitext(self.name.lower())[1]

    def read_bytes(self) -> bytes:
        if self.content is not None:
            return self.content
        if self.path is None:
            raise ExtractionError(f"No content available for {self.name}")
        with open(self.path, 'rb') as f:
            return f.read()

@dataclass
class ValidationResult:
    accepted: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted

def validate_file(file: ResumeFile) -> ValidationResult:
    """
    Checks an upload against the type/extension allow-list and the size
    ceiling. Either the declared type or the extension may qualify the file.
    """
    type_ok = file.type in ALLOWED_TYPES
    extension_ok = file.suffix in ALLOWED_EXTENSIONS
    if not (type_ok or extension_ok):
        return ValidationResult(False, "Please upload a PDF, DOC, DOCX, or TXT file")

    if file.size > MAX_FILE_SIZE:
        return ValidationResult(False, "File size must be less than 10MB")

    return ValidationResult(True)

def require_valid(file: ResumeFile) -> ResumeFile:
    """Like validate_file, but raises ValidationError with the rejection reason."""
    verdict = validate_file(file)
    if not verdict:
        raise ValidationError(verdict.reason)
    return file

def format_file_size(size: int) -> str:
    """Human readable size, e.g. '2 KB' or '1.5 MB'."""
    if size == 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    value = round(value, 2)
    if value == int(value):
        value = int(value)
    return f"{value} {units[i]}"

def _is_word(file: ResumeFile) -> bool:
    return "word" in file.type or file.suffix in (".docx", ".doc")

def _is_pdf(file: ResumeFile) -> bool:
    return file.type == PDF_TYPE or (not file.type and file.suffix == ".pdf")

def _is_text(file: ResumeFile) -> bool:
    return file.type == TEXT_TYPE or (not file.type and file.suffix == ".txt")

def read_pdf(data: bytes) -> str:
    """
    Extracts text from PDF bytes.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except (PdfReadError, ValueError) as e:
        raise CorruptFileError(f"Could not read PDF: {e}") from e
    return '\n'.join(p for p in pages if p)

def read_docx(data: bytes) -> str:
    """
    Extracts text from DOCX bytes.
    """
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        # python-docx surfaces zip and xml failures as several unrelated types
        raise CorruptFileError(f"Could not read DOCX: {e}") from e
    return '\n'.join(para.text for para in doc.paragraphs)

async def extract_text(file: ResumeFile, settings: Optional[Settings] = None) -> str:
    """
    Returns the plain text of a validated upload.

    Plain text is decoded directly. PDF and Word uploads return a sample
    transcript unless settings.real_extraction is enabled, in which case
    pypdf / python-docx do the work (legacy .doc always uses the sample).
    """
    settings = settings or Settings()
    try:
        data = await asyncio.to_thread(file.read_bytes)
    except OSError as e:
        raise ExtractionError(f"Failed to read file {file.name}: {e}") from e

    if _is_pdf(file):
        if settings.real_extraction:
            logger.debug(f"Extracting PDF text from {file.name}")
            return await asyncio.to_thread(read_pdf, data)
        logger.info(f"Using sample transcript for PDF upload {file.name}")
        return SAMPLE_PDF_TRANSCRIPT
    elif _is_word(file):
        if settings.real_extraction and (file.type == DOCX_TYPE or file.suffix == ".docx"):
            logger.debug(f"Extracting DOCX text from {file.name}")
            return await asyncio.to_thread(read_docx, data)
        logger.info(f"Using sample transcript for Word upload {file.name}")
        return SAMPLE_WORD_TRANSCRIPT
    elif _is_text(file):
        return data.decode("utf-8", errors="replace")

    raise UnsupportedFormatError(f"Unsupported file type: {file.type or file.suffix or 'unknown'}")

def _extract_text_from_html(html) -> str:
    """Extracts clean text from raw HTML content."""
    soup = BeautifulSoup(html, 'html.parser')

    for script in soup(["script", "style"]):
        script.decompose()

    lines = (line.strip() for line in soup.get_text().splitlines())
    # Break multi-headlines into a line each
    chunks = (phrase.strip() for line in lines for phrase in line.split("  "))
    return '\n'.join(chunk for chunk in chunks if chunk)

def read_url(url: str, settings: Optional[Settings] = None) -> str:
    """
    Fetches a job posting and returns its visible text.
    """
    settings = settings or Settings()
    headers = {'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36'}
    try:
        response = requests.get(url, headers=headers, timeout=10, verify=settings.get_ca_bundle())
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        return ""
    return _extract_text_from_html(response.content)

def read_job_description(source: str, settings: Optional[Settings] = None) -> str:
    """
    Loads a job description from a URL, a .docx / .pdf document or a text
    file. Returns an empty string when nothing could be read.
    """
    if source.startswith("http"):
        logger.info(f"Fetching job description from: {source}")
        return read_url(source, settings)

    try:
        with open(source, 'rb') as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Failed to read job description {source}: {e}")
        return ""

    lower = source.lower()
    try:
        if lower.endswith(".docx"):
            return read_docx(data)
        if lower.endswith(".pdf"):
            return read_pdf(data)
    except CorruptFileError as e:
        logger.error(f"Error reading {source}: {e}")
        return ""
    return data.decode("utf-8", errors="replace")

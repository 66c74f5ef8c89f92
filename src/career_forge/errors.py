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
Exception hierarchy for Career Forge.
"""

from typing import Optional


class CareerForgeError(Exception):
    """Base class for all application errors."""


class ValidationError(CareerForgeError):
    """An uploaded file failed the type or size checks."""


class ExtractionError(CareerForgeError):
    """Text could not be extracted from an uploaded file."""


class UnsupportedFormatError(ExtractionError):
    """No extraction branch handles the file's declared type."""


class CorruptFileError(ExtractionError):
    """The document parser could not read the file contents."""


class ParseError(CareerForgeError):
    """Extracted text could not be turned into structured resume data."""


class AnalysisError(CareerForgeError):
    """An analysis facet (score, gap, path, dna, questions) failed."""

    def __init__(self, message: str, facet: Optional[str] = None):
        super().__init__(message)
        self.facet = facet


class OperationInProgressError(CareerForgeError):
    """An operation of the same kind is already running."""

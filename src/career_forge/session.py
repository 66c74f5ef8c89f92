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
Single owned application state for one user session, and the upload and
job-analysis workflows that write into it.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from career_forge.builder import ResumeBuilder
from career_forge.config import Settings
from career_forge.errors import AnalysisError, OperationInProgressError, ValidationError
from career_forge.gamification import Reward, XPTracker
from career_forge.ingest import ResumeFile, extract_text, require_valid
from career_forge.llm_client import AnalysisClient
from career_forge.models import ProcessedResumeData
from career_forge.progress import ProgressTicker
from career_forge.results import AnalysisResults
from career_forge.simulator import RecruiterSimulator

logger = logging.getLogger(__name__)

UPLOAD_FAILED_MESSAGE = "Failed to process resume. Please try again."
LEARNING_LEVEL = "intermediate"

@dataclass
class UploadState:
    file: Optional[ResumeFile] = None
    error: Optional[str] = None
    progress: int = 0
    processing: bool = False

class CareerSession:
    """
    Holds everything the views read: the processed resume, the builder,
    analysis results, XP and the simulator. Views never write state
    directly; they call the methods below.
    """
    def __init__(self, settings: Optional[Settings] = None, client: Optional[AnalysisClient] = None):
        self.settings = settings or Settings.from_env()
        self.client = client or AnalysisClient(self.settings)
        self.builder = ResumeBuilder()
        self.results = AnalysisResults()
        self.xp = XPTracker()
        self.simulator = RecruiterSimulator(self.xp, self.settings)
        self.upload = UploadState()
        self.processed: Optional[ProcessedResumeData] = None
        self.job_description = ""
        self.analyzing = False
        self._uploading = False

    @property
    def is_processing(self) -> bool:
        return self.upload.processing or self.analyzing

    def _set_upload_progress(self, value: int):
        self.upload.progress = value

    async def handle_upload(self, file: ResumeFile):
        """
        Validates, extracts and parses an uploaded resume, then seeds the
        builder with the result. Validation and processing failures are
        reported through self.upload.error; nothing is raised for them.
        """
        if self._uploading:
            raise OperationInProgressError("A resume upload is already being processed")

        self._uploading = True
        try:
            await self._process_upload(file)
        finally:
            self._uploading = False

    async def _process_upload(self, file: ResumeFile):
        self.upload.error = None
        try:
            require_valid(file)
        except ValidationError as e:
            logger.warning(f"Rejected upload {file.name}: {e}")
            self.upload.error = str(e)
            return

        self.upload.file = file
        self.upload.processing = True
        self._set_upload_progress(0)

        try:
            ticker = ProgressTicker(
                self._set_upload_progress,
                step=self.settings.progress_step,
                interval=self.settings.progress_interval,
                cap=self.settings.progress_cap,
            )
            async with ticker:
                text = await extract_text(file, self.settings)
                processed = await asyncio.to_thread(self.client.parse_resume, text)

            self._set_upload_progress(100)
            await asyncio.sleep(self.settings.commit_delay)

            self.processed = processed
            self.builder.import_processed(processed)
            self.xp.award(Reward.UPLOAD)
            logger.info(f"Processed resume for {processed.personal_info.name or 'unknown candidate'}")
        except Exception as e:
            logger.error(f"Error processing resume {file.name}: {e}")
            self.upload.error = UPLOAD_FAILED_MESSAGE
            self._set_upload_progress(0)
        finally:
            self.upload.processing = False

    def clear_upload(self):
        self.upload = UploadState()

    async def _run_facet(self, facet: str, func, *args):
        try:
            value = await asyncio.to_thread(func, *args)
        except AnalysisError as e:
            e.facet = e.facet or facet
            self.results.record_error(facet, e)
            raise
        except Exception as e:
            error = AnalysisError(f"{facet} analysis failed: {e}", facet=facet)
            self.results.record_error(facet, error)
            raise error from e
        self.results.store(facet, value)
        return value

    async def analyze_job(self, job_description: str):
        """
        Runs match scoring, skill gap, learning path, career profile and
        interview questions in order. Silently does nothing without a
        processed resume or a job description. The first failing facet is
        recorded and stops the rest; earlier results are kept.
        """
        if self.processed is None or not job_description.strip():
            return
        if self.analyzing:
            raise OperationInProgressError("A job analysis is already running")

        self.job_description = job_description
        processed = self.processed
        self.analyzing = True
        try:
            await self._run_facet("match", self.client.match_job, processed.extracted_text, job_description)
            gap = await self._run_facet("skill_gap", self.client.skill_gap, processed.skills, job_description)
            await self._run_facet("learning_path", self.client.learning_path, gap.missing_skills, LEARNING_LEVEL)
            await self._run_facet("career_dna", self.client.career_profile, processed)
            await self._run_facet("interview_questions", self.client.interview_questions, job_description, processed.skills)
            self.xp.award(Reward.ANALYSIS)
        except AnalysisError as e:
            logger.error(f"Error analyzing job ({e.facet}): {e}")
        finally:
            self.analyzing = False

    def complete_task(self, task_id: int) -> bool:
        """Completes a learning task; XP is granted only the first time."""
        if not self.results.complete_task(task_id):
            logger.debug(f"Task {task_id} not completable (missing or already done)")
            return False
        self.xp.award(Reward.TASK)
        return True

    async def run_simulator(self):
        return await self.simulator.run()

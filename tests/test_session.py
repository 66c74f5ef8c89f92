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

import asyncio
import threading
import unittest
from unittest.mock import patch, AsyncMock

from career_forge import ingest
from career_forge.config import Settings
from career_forge.errors import ExtractionError, OperationInProgressError
from career_forge.ingest import ResumeFile
from career_forge.llm_client import AnalysisClient
from career_forge.session import CareerSession, UPLOAD_FAILED_MESSAGE

JOB = "Senior Python engineer. We run Docker and Kubernetes on AWS."

def _jane_file(size=2048):
    text = "Jane Doe\njane@x.com\nPython developer with 5 years of Docker experience.\n"
    content = text.encode("utf-8").ljust(size, b" ")
    return ResumeFile.from_bytes("jane.txt", content, ingest.TEXT_TYPE)

def _fast_settings():
    return Settings(progress_interval=0, commit_delay=0, simulator_interval=0)

class TestUpload(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        settings = _fast_settings()
        self.session = CareerSession(settings, AnalysisClient(settings))

    async def test_text_upload_seeds_builder(self):
        file = _jane_file()
        self.assertEqual(file.size, 2048)

        await self.session.handle_upload(file)

        upload = self.session.upload
        self.assertIsNone(upload.error)
        self.assertEqual(upload.progress, 100)
        self.assertFalse(upload.processing)
        self.assertIs(upload.file, file)
        self.assertEqual(self.session.processed.personal_info.name, "Jane Doe")
        self.assertEqual(self.session.builder.data.personal_info.name, "Jane Doe")
        self.assertIn("Python", self.session.builder.data.skills)
        self.assertEqual(self.session.xp.xp, 100)

    async def test_rejected_file_is_never_extracted(self):
        file = ResumeFile.from_bytes("photo.png", b"\x89PNG", "image/png")
        with patch('career_forge.session.extract_text', new=AsyncMock()) as mock_extract:
            await self.session.handle_upload(file)
        mock_extract.assert_not_called()
        self.assertEqual(self.session.upload.error, "Please upload a PDF, DOC, DOCX, or TXT file")
        self.assertIsNone(self.session.upload.file)
        self.assertEqual(self.session.xp.xp, 0)

    async def test_oversized_file_is_rejected(self):
        file = ResumeFile(name="big.pdf", type=ingest.PDF_TYPE, size=ingest.MAX_FILE_SIZE + 1)
        await self.session.handle_upload(file)
        self.assertEqual(self.session.upload.error, "File size must be less than 10MB")

    async def test_extraction_failure_keeps_file(self):
        file = _jane_file()
        with patch('career_forge.session.extract_text', new=AsyncMock(side_effect=ExtractionError("bad bytes"))):
            await self.session.handle_upload(file)

        upload = self.session.upload
        self.assertEqual(upload.error, UPLOAD_FAILED_MESSAGE)
        self.assertEqual(upload.progress, 0)
        self.assertFalse(upload.processing)
        self.assertIs(upload.file, file)
        self.assertIsNone(self.session.processed)
        self.assertEqual(self.session.xp.xp, 0)

    async def test_unsupported_declared_type_fails_processing(self):
        file = ResumeFile.from_bytes("cv.txt", b"Jane Doe", "application/octet-stream")
        await self.session.handle_upload(file)
        self.assertEqual(self.session.upload.error, UPLOAD_FAILED_MESSAGE)

    async def test_concurrent_upload_is_rejected(self):
        release = asyncio.Event()

        async def slow_extract(file, settings):
            await release.wait()
            return "Jane Doe\njane@x.com"

        with patch('career_forge.session.extract_text', new=slow_extract):
            first = asyncio.ensure_future(self.session.handle_upload(_jane_file()))
            await asyncio.sleep(0)
            self.assertTrue(self.session.upload.processing)
            with self.assertRaises(OperationInProgressError):
                await self.session.handle_upload(_jane_file())
            release.set()
            await first

        self.assertEqual(self.session.xp.xp, 100)

    async def test_clear_upload(self):
        await self.session.handle_upload(_jane_file())
        self.session.clear_upload()
        self.assertIsNone(self.session.upload.file)
        self.assertEqual(self.session.upload.progress, 0)

class TestAnalysis(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        settings = _fast_settings()
        self.client = AnalysisClient(settings)
        self.session = CareerSession(settings, self.client)
        await self.session.handle_upload(_jane_file())

    async def test_no_resume_or_blank_job_is_noop(self):
        fresh = CareerSession(_fast_settings(), self.client)
        await fresh.analyze_job(JOB)
        self.assertIsNone(fresh.results.match)

        await self.session.analyze_job("   ")
        self.assertIsNone(self.session.results.match)
        self.assertEqual(self.session.xp.xp, 100)

    async def test_full_analysis_fills_every_facet(self):
        await self.session.analyze_job(JOB)
        results = self.session.results
        self.assertIsNotNone(results.match)
        self.assertIn("Kubernetes", results.skill_gap.missing_skills)
        self.assertTrue(results.learning_path.tasks)
        self.assertIsNotNone(results.career_dna)
        self.assertTrue(results.interview_questions)
        self.assertEqual(results.errors, {})
        self.assertEqual(self.session.xp.xp, 300)
        self.assertFalse(self.session.analyzing)

    async def test_failing_facet_stops_analysis_and_keeps_earlier_results(self):
        with patch.object(self.client, 'skill_gap', side_effect=RuntimeError("provider down")):
            await self.session.analyze_job(JOB)

        results = self.session.results
        self.assertIsNotNone(results.match)
        self.assertIsNone(results.skill_gap)
        self.assertIsNone(results.learning_path)
        self.assertEqual(results.error_for("skill_gap").facet, "skill_gap")
        self.assertEqual(self.session.xp.xp, 100)
        self.assertFalse(self.session.analyzing)

    async def test_second_analysis_is_refused_while_first_runs(self):
        original = self.client.match_job
        release = threading.Event()

        def slow_match(*args):
            release.wait(5)
            return original(*args)

        with patch.object(self.client, 'match_job', side_effect=slow_match):
            first = asyncio.ensure_future(self.session.analyze_job(JOB))
            await asyncio.sleep(0)
            self.assertTrue(self.session.analyzing)
            with self.assertRaises(OperationInProgressError):
                await self.session.analyze_job(JOB)
            release.set()
            await first

        self.assertFalse(self.session.analyzing)
        self.assertEqual(self.session.xp.xp, 300)

    async def test_complete_task_awards_once(self):
        await self.session.analyze_job(JOB)
        task_id = self.session.results.learning_path.tasks[0].id

        self.assertTrue(self.session.complete_task(task_id))
        self.assertFalse(self.session.complete_task(task_id))
        self.assertFalse(self.session.complete_task(999))
        self.assertEqual(self.session.xp.xp, 350)

    async def test_simulator_through_session(self):
        heatmap = await self.session.run_simulator()
        self.assertEqual(len(heatmap), 6)
        self.assertEqual(self.session.xp.xp, 250)

if __name__ == '__main__':
    unittest.main()

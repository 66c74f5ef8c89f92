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

import io
import unittest

from rich.console import Console

from career_forge import ingest, views
from career_forge.config import Settings
from career_forge.errors import AnalysisError
from career_forge.ingest import ResumeFile
from career_forge.llm_client import AnalysisClient
from career_forge.session import CareerSession

class TestViews(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        settings = Settings(progress_interval=0, commit_delay=0, simulator_interval=0)
        self.session = CareerSession(settings, AnalysisClient(settings))
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=120, color_system=None)

    def _render(self, tabs=views.TABS):
        views.show(self.session, tabs, self.console)
        return self.buffer.getvalue()

    async def test_empty_session_renders_placeholders(self):
        output = self._render()
        self.assertIn("No resume uploaded", output)
        self.assertIn("Please upload your resume to get salary insights", output)
        self.assertIn("--%", output)

    async def test_full_session_renders_every_tab(self):
        text = b"Jane Doe\njane@x.com\nPython developer with 5 years of Docker experience."
        await self.session.handle_upload(ResumeFile.from_bytes("jane.txt", text, ingest.TEXT_TYPE))
        await self.session.analyze_job("Senior Python engineer with Kubernetes")
        await self.session.run_simulator()

        output = self._render()
        self.assertIn("Jane Doe", output)
        self.assertIn("jane.txt", output)
        self.assertIn("Skill Gap Analysis", output)
        self.assertIn("Kubernetes fundamentals", output)
        self.assertIn("Experience", output)
        self.assertIn("$110,000", output)

    async def test_dashboard_lists_recent_awards(self):
        text = b"Jane Doe\njane@x.com\nPython developer."
        await self.session.handle_upload(ResumeFile.from_bytes("jane.txt", text, ingest.TEXT_TYPE))

        output = self._render(("dashboard",))
        self.assertIn("Recent XP", output)
        self.assertIn("+100 upload (total 100)", output)

    async def test_failed_facets_show_their_error(self):
        for facet in ("learning_path", "career_dna", "interview_questions"):
            self.session.results.record_error(facet, AnalysisError("provider down", facet=facet))

        output = self._render(("growth", "dna", "interview"))
        self.assertIn("Learning path failed: provider down", output)
        self.assertIn("Career DNA failed: provider down", output)
        self.assertIn("Interview questions failed: provider down", output)
        self.assertNotIn("No interview questions yet", output)

if __name__ == '__main__':
    unittest.main()

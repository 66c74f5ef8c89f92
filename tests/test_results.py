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

import unittest

from career_forge.errors import AnalysisError
from career_forge.models import JobMatch, LearningPath, LearningTask
from career_forge.results import AnalysisResults

class TestAnalysisResults(unittest.TestCase):
    def setUp(self):
        self.results = AnalysisResults()

    def test_store_replaces_and_clears_error(self):
        self.results.record_error("match", AnalysisError("boom", facet="match"))
        self.results.store("match", JobMatch(ats_score=72, suggestions=["a"]))
        self.results.store("match", JobMatch(ats_score=64))
        self.assertEqual(self.results.ats_score, 64)
        self.assertEqual(self.results.suggestions, [])
        self.assertIsNone(self.results.error_for("match"))

    def test_unknown_facet(self):
        with self.assertRaises(KeyError):
            self.results.store("horoscope", "Leo")

    def test_empty_defaults(self):
        self.assertIsNone(self.results.ats_score)
        self.assertEqual(self.results.suggestions, [])
        self.assertEqual(self.results.interview_questions, [])

    def test_complete_task_flips_once(self):
        self.results.store("learning_path", LearningPath("Path", "2 weeks", [
            LearningTask(id=1, title="A"),
            LearningTask(id=2, title="B"),
        ]))
        self.assertTrue(self.results.complete_task(2))
        self.assertFalse(self.results.complete_task(2))
        self.assertFalse(self.results.complete_task(99))
        self.assertEqual([t.completed for t in self.results.learning_path.tasks], [False, True])

    def test_complete_task_without_path(self):
        self.assertFalse(self.results.complete_task(1))

    def test_clear(self):
        self.results.store("interview_questions", ["Why?"])
        self.results.clear()
        self.assertEqual(self.results.interview_questions, [])

if __name__ == '__main__':
    unittest.main()

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
Latest results of the external analysis calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from career_forge.errors import AnalysisError
from career_forge.models import (
    CareerDNA,
    JobMatch,
    LearningPath,
    SkillGapAnalysis,
)

logger = logging.getLogger(__name__)

FACETS = ("match", "skill_gap", "learning_path", "career_dna", "interview_questions")

@dataclass
class AnalysisResults:
    """
    Last-write-wins store: each setter replaces the facet wholesale and
    clears any error recorded for it. Nothing is merged.
    """
    match: Optional[JobMatch] = None
    skill_gap: Optional[SkillGapAnalysis] = None
    learning_path: Optional[LearningPath] = None
    career_dna: Optional[CareerDNA] = None
    interview_questions: List[str] = field(default_factory=list)
    errors: Dict[str, AnalysisError] = field(default_factory=dict)

    @property
    def ats_score(self) -> Optional[int]:
        return self.match.ats_score if self.match else None

    @property
    def suggestions(self) -> List[str]:
        return self.match.suggestions if self.match else []

    def store(self, facet: str, value):
        if facet not in FACETS:
            raise KeyError(f"Unknown analysis facet: {facet}")
        setattr(self, facet, value)
        self.errors.pop(facet, None)

    def record_error(self, facet: str, error: AnalysisError):
        logger.debug(f"Recording {facet} failure: {error}")
        self.errors[facet] = error

    def error_for(self, facet: str) -> Optional[AnalysisError]:
        return self.errors.get(facet)

    def complete_task(self, task_id: int) -> bool:
        """
        Marks a learning task completed. Returns True only when the flag
        actually flipped, so callers can reward exactly once.
        """
        if self.learning_path is None:
            return False
        task = self.learning_path.find_task(task_id)
        if task is None or task.completed:
            return False
        task.completed = True
        return True

    def clear(self):
        self.match = None
        self.skill_gap = None
        self.learning_path = None
        self.career_dna = None
        self.interview_questions = []
        self.errors = {}

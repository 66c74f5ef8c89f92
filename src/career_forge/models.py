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
Data models for the Career Forge application.

Resume entities are frozen: the builder derives a new ResumeData for every
edit instead of mutating the previous one.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

@dataclass(frozen=True)
class PersonalInfo:
    """Contact block at the top of a resume. Free text, never validated."""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""

@dataclass(frozen=True)
class ExperienceEntry:
    id: int
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

@dataclass(frozen=True)
class EducationEntry:
    id: int
    degree: str = ""
    institution: str = ""
    year: str = ""
    gpa: str = ""

@dataclass(frozen=True)
class ProjectEntry:
    id: int
    name: str = ""
    description: str = ""
    technologies: str = ""
    link: str = ""

@dataclass(frozen=True)
class ResumeData:
    """
    The canonical in-memory resume edited by the builder.
    Sequences are tuples so that each version is independent of the last.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()

@dataclass
class ProcessedResumeData:
    """Structured result of parsing an uploaded resume."""
    personal_info: PersonalInfo
    summary: str
    skills: List[str]
    extracted_text: str
    experience_years: int = 0
    sections: List[str] = field(default_factory=list)

@dataclass
class JobMatch:
    """ATS compatibility between a resume and a job description."""
    ats_score: int
    suggestions: List[str] = field(default_factory=list)

@dataclass
class SkillLevel:
    skill: str
    level: int # 0-10

@dataclass
class SkillGapAnalysis:
    match_percentage: int
    current_skills: List[SkillLevel] = field(default_factory=list)
    required_skills: List[SkillLevel] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)

TASK_TYPES = ("course", "project", "other")

@dataclass
class LearningTask:
    id: int
    title: str
    description: str = ""
    duration: str = ""
    type: str = "other"
    completed: bool = False

@dataclass
class LearningPath:
    title: str
    duration: str
    tasks: List[LearningTask] = field(default_factory=list)

    def find_task(self, task_id: int) -> Optional[LearningTask]:
        return next((t for t in self.tasks if t.id == task_id), None)

@dataclass
class CareerDNA:
    """Derived career profile. Read-only once received."""
    archetype: str
    strengths: List[str] = field(default_factory=list)
    growth_areas: List[str] = field(default_factory=list)
    career_stage: str = ""
    recommended_roles: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class HeatmapPoint:
    """Recruiter attention on one resume section, placed on the page grid."""
    section: str
    attention: int
    x: int
    y: int

@dataclass(frozen=True)
class SalaryBand:
    level: str
    min: int
    avg: int
    max: int

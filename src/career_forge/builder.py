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
Form-driven resume builder.

The builder owns the current ResumeData and the active step. Steps only
select what is shown; every field stays editable whatever the step. All
edits are total: unknown ids are no-ops and nothing raises.
"""

import logging
import threading
import time
from dataclasses import fields, replace
from enum import Enum
from typing import Callable, Optional

from career_forge.models import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProcessedResumeData,
    ProjectEntry,
    ResumeData,
)

logger = logging.getLogger(__name__)

class BuilderStep(Enum):
    PERSONAL = "personal"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    PREVIEW = "preview"

STEPS = list(BuilderStep)

class IdMinter:
    """
    Mints millisecond-timestamp ids that are strictly increasing for the
    life of the process, so two entries added in the same millisecond
    still get distinct ids.
    """
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            self._last = max(candidate, self._last + 1)
            return self._last

_default_minter = IdMinter()

# Entry type per list field of ResumeData
_LIST_KINDS = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "projects": ProjectEntry,
}

class ResumeBuilder:
    """
    Editing session over a ResumeData value.

    Each mutation swaps `data` for a new ResumeData and bumps `version`;
    listeners registered with subscribe() are called with the new value.
    """
    def __init__(self, data: Optional[ResumeData] = None, minter: Optional[IdMinter] = None):
        self.data = data or ResumeData()
        self.version = 0
        self.step = BuilderStep.PERSONAL
        self._mint = minter or _default_minter
        self._listeners = []

    def subscribe(self, listener: Callable[[ResumeData], None]):
        self._listeners.append(listener)

    def _commit(self, data: ResumeData):
        self.data = data
        self.version += 1
        for listener in self._listeners:
            listener(data)

    # --- Steps ---

    def go_to(self, step: BuilderStep):
        self.step = BuilderStep(step)

    def next_step(self) -> BuilderStep:
        index = STEPS.index(self.step)
        self.step = STEPS[min(index + 1, len(STEPS) - 1)]
        return self.step

    def previous_step(self) -> BuilderStep:
        index = STEPS.index(self.step)
        self.step = STEPS[max(index - 1, 0)]
        return self.step

    # --- Generic list operations ---

    def _add(self, kind: str):
        entry = _LIST_KINDS[kind](id=self._mint())
        items = getattr(self.data, kind)
        self._commit(replace(self.data, **{kind: items + (entry,)}))
        logger.debug(f"Added {kind} entry {entry.id}")
        return entry

    def _update(self, kind: str, entry_id: int, field_name: str, value: str):
        editable = {f.name for f in fields(_LIST_KINDS[kind])} - {"id"}
        if field_name not in editable:
            logger.warning(f"Ignoring update of unknown {kind} field '{field_name}'")
            return
        items = getattr(self.data, kind)
        if not any(item.id == entry_id for item in items):
            return
        updated = tuple(
            replace(item, **{field_name: value}) if item.id == entry_id else item
            for item in items
        )
        self._commit(replace(self.data, **{kind: updated}))

    def _remove(self, kind: str, entry_id: int):
        items = getattr(self.data, kind)
        kept = tuple(item for item in items if item.id != entry_id)
        if len(kept) == len(items):
            return
        self._commit(replace(self.data, **{kind: kept}))

    # --- Experience ---

    def add_experience(self) -> ExperienceEntry:
        return self._add("experience")

    def update_experience(self, entry_id: int, field_name: str, value: str):
        self._update("experience", entry_id, field_name, value)

    def remove_experience(self, entry_id: int):
        self._remove("experience", entry_id)

    # --- Education ---

    def add_education(self) -> EducationEntry:
        return self._add("education")

    def update_education(self, entry_id: int, field_name: str, value: str):
        self._update("education", entry_id, field_name, value)

    def remove_education(self, entry_id: int):
        self._remove("education", entry_id)

    # --- Projects ---

    def add_project(self) -> ProjectEntry:
        return self._add("projects")

    def update_project(self, entry_id: int, field_name: str, value: str):
        self._update("projects", entry_id, field_name, value)

    def remove_project(self, entry_id: int):
        self._remove("projects", entry_id)

    # --- Skills ---

    def add_skill(self, skill: str):
        """Appends a trimmed skill unless it is empty or already present."""
        skill = skill.strip()
        if not skill or skill in self.data.skills:
            return
        self._commit(replace(self.data, skills=self.data.skills + (skill,)))

    def remove_skill(self, skill: str):
        if skill not in self.data.skills:
            return
        self._commit(replace(self.data, skills=tuple(s for s in self.data.skills if s != skill)))

    # --- Scalar fields ---

    def update_personal_info(self, field_name: str, value: str):
        if field_name not in {f.name for f in fields(PersonalInfo)}:
            logger.warning(f"Ignoring update of unknown personal info field '{field_name}'")
            return
        info = replace(self.data.personal_info, **{field_name: value})
        self._commit(replace(self.data, personal_info=info))

    def set_summary(self, summary: str):
        self._commit(replace(self.data, summary=summary))

    def import_processed(self, processed: ProcessedResumeData):
        """
        Seeds personal info, summary and skills from a parsed upload,
        overwriting what was there. Lists are left alone.
        """
        skills = tuple(dict.fromkeys(s for s in processed.skills if s))
        self._commit(replace(
            self.data,
            personal_info=processed.personal_info,
            summary=processed.summary,
            skills=skills,
        ))

    def reset(self):
        self.step = BuilderStep.PERSONAL
        self._commit(ResumeData())

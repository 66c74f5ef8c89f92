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
Derived view data for the dashboard: chart rows, score bands and the
salary tables. Pure functions over the session's state.
"""

import zlib
from dataclasses import dataclass
from typing import List

from career_forge.models import SalaryBand, SkillGapAnalysis

SALARY_BANDS = (
    SalaryBand(level="Entry", min=60000, avg=70000, max=80000),
    SalaryBand(level="Mid", min=75000, avg=85000, max=95000),
    SalaryBand(level="Senior", min=95000, avg=110000, max=130000),
    SalaryBand(level="Lead", min=120000, avg=140000, max=160000),
)

ESTIMATED_BASE_SALARY = 85000
MARKET_AVERAGE_SALARY = 95000
TARGET_SALARY = 110000

@dataclass(frozen=True)
class SkillGapRow:
    skill: str
    current: int
    required: int
    gap: int

    @property
    def met(self) -> bool:
        return self.gap == 0

@dataclass(frozen=True)
class SkillValue:
    skill: str
    demand: int
    salary_impact: int

def skill_gap_rows(analysis: SkillGapAnalysis) -> List[SkillGapRow]:
    """
    One row per required skill. The current level comes from the
    case-insensitive matching current skill, or 0 when there is none.
    """
    current = {}
    for entry in analysis.current_skills:
        current.setdefault(entry.skill.lower(), entry.level)

    rows = []
    for required in analysis.required_skills:
        level = current.get(required.skill.lower(), 0)
        rows.append(SkillGapRow(
            skill=required.skill,
            current=level,
            required=required.level,
            gap=max(0, required.level - level),
        ))
    return rows

def score_band(score: int) -> str:
    """'good' (>= 80), 'fair' (>= 60) or 'poor'; drives colour in the views."""
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"

def score_verdict(score: int) -> str:
    return {
        "good": "Excellent match!",
        "fair": "Good match with room for improvement",
        "poor": "Needs significant optimization",
    }[score_band(score)]

def skill_market_value(skills: List[str], limit: int = 6) -> List[SkillValue]:
    """
    Market demand (60-100%) and salary impact ($5k-20k) per skill. Values
    are stable per skill name so repeated renders agree.
    """
    values = []
    for skill in skills[:limit]:
        seed = zlib.crc32(skill.lower().encode("utf-8"))
        values.append(SkillValue(
            skill=skill,
            demand=60 + seed % 40,
            salary_impact=5000 + (seed // 40) % 15000,
        ))
    return values

def format_currency(amount: int) -> str:
    return f"${amount:,}"

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
Deterministic offline analysis, used whenever no LLM provider is configured
or a provider call fails.

Parsing is line based (first line is the name, contact details by regex,
sections by heading). Matching is keyword overlap against a fixed
vocabulary of technical and product skills.
"""

import re
import logging
from typing import Dict, List, Optional

from career_forge.models import (
    CareerDNA,
    JobMatch,
    LearningPath,
    LearningTask,
    PersonalInfo,
    ProcessedResumeData,
    SkillGapAnalysis,
    SkillLevel,
)

logger = logging.getLogger(__name__)

EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE = re.compile(r"\+?\d[\d\s().-]{7,}\d")
LINKEDIN = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[\w/-]+", re.I)
WEBSITE = re.compile(r"(?:https?://|www\.)[^\s|,]+", re.I)
YEARS = re.compile(r"(\d{1,2})\+?\s*years?", re.I)
BULLET = re.compile(r"^[•\-*➢▪]\s*")

# Section headings recognised on their own line (compared lower-cased)
SECTION_HEADINGS = {
    "summary": ("professional summary", "summary", "profile", "about me", "objective"),
    "skills": ("technical skills", "skills", "core competencies", "competencies"),
    "experience": ("professional experience", "work experience", "experience", "employment"),
    "education": ("education",),
    "projects": ("projects", "projects & achievements"),
    "certifications": ("certifications", "certifications & achievements", "certifications & training"),
    "languages": ("languages",),
}

# Vocabulary of recognised skills, grouped for career-profile derivation
SKILL_KEYWORDS: Dict[str, List[str]] = {
    'languages': ['Python', 'Java', 'JavaScript', 'TypeScript', 'C++', 'C#', 'Ruby', 'Golang', 'Rust', 'Scala', 'SQL'],
    'web': ['React', 'Next.js', 'Vue.js', 'Angular', 'Node.js', 'Express.js', 'Django', 'Flask', 'FastAPI', 'Spring Boot', 'GraphQL', 'REST API'],
    'data': ['PostgreSQL', 'MySQL', 'MongoDB', 'Redis', 'Spark', 'Kafka', 'Airflow', 'Tableau', 'Power BI'],
    'ml_ai': ['Machine Learning', 'Deep Learning', 'NLP', 'TensorFlow', 'PyTorch', 'scikit-learn'],
    'cloud': ['AWS', 'Azure', 'GCP', 'Docker', 'Kubernetes', 'Terraform', 'Jenkins', 'CI/CD', 'Git'],
    'product': ['Product Strategy', 'Roadmap', 'User Research', 'A/B Testing', 'Agile', 'Scrum', 'Stakeholder Management', 'Analytics', 'Figma', 'Jira'],
}

ARCHETYPES = {
    'languages': ("The Builder", ["Software Engineer", "Backend Engineer", "Full Stack Developer"]),
    'web': ("The Builder", ["Full Stack Developer", "Frontend Engineer", "Software Engineer"]),
    'data': ("The Analyst", ["Data Engineer", "Analytics Engineer", "Data Analyst"]),
    'ml_ai': ("The Innovator", ["Machine Learning Engineer", "Data Scientist", "AI Engineer"]),
    'cloud': ("The Architect", ["DevOps Engineer", "Cloud Architect", "Site Reliability Engineer"]),
    'product': ("The Strategist", ["Product Manager", "Senior Product Manager", "Product Owner"]),
}

CATEGORY_LABELS = {
    'languages': "Programming fundamentals",
    'web': "Web application development",
    'data': "Data management",
    'ml_ai': "Machine learning",
    'cloud': "Cloud and DevOps",
    'product': "Product thinking",
}

def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(r"(?<![\w])" + re.escape(keyword.lower()) + r"(?![\w])")

_PATTERNS = {kw: _keyword_pattern(kw) for kws in SKILL_KEYWORDS.values() for kw in kws}

def find_keywords(text: str) -> List[str]:
    """Vocabulary skills mentioned in text, in vocabulary order."""
    lower = text.lower()
    return [kw for kw, pattern in _PATTERNS.items() if pattern.search(lower)]

def category_of(skill: str) -> Optional[str]:
    lower = skill.lower()
    for category, keywords in SKILL_KEYWORDS.items():
        if any(kw.lower() == lower for kw in keywords):
            return category
    return None

def _heading(line: str) -> Optional[str]:
    normalised = line.strip().rstrip(":").lower()
    for section, names in SECTION_HEADINGS.items():
        if normalised in names:
            return section
    return None

def _split_sections(lines: List[str]) -> Dict[str, List[str]]:
    sections: Dict[str, List[str]] = {}
    current = None
    for line in lines:
        section = _heading(line)
        if section:
            current = section
            sections.setdefault(current, [])
        elif current:
            sections[current].append(line)
    return sections

def _skills_from_section(lines: List[str]) -> List[str]:
    skills = []
    for line in lines:
        line = BULLET.sub("", line)
        if ":" in line:
            line = line.split(":", 1)[1]
            parts = [p.strip() for p in line.split(",")]
        else:
            parts = [line.strip()]
        for part in parts:
            part = part.strip(" .")
            if part and len(part) < 40 and part not in skills:
                skills.append(part)
    return skills

def _display_name(line: str) -> str:
    return line.title() if line.isupper() else line

def parse_resume_text(text: str) -> ProcessedResumeData:
    """
    Line based resume parser. The first non-blank line is taken as the
    candidate's name; contact details are found by pattern anywhere in the
    first twenty lines.
    """
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    head = "\n".join(lines[:20])

    name = _display_name(lines[0]) if lines else ""
    if EMAIL.fullmatch(name):
        name = ""

    email = m.group() if (m := EMAIL.search(head)) else ""
    phone = m.group().strip() if (m := PHONE.search(head)) else ""
    linkedin = m.group() if (m := LINKEDIN.search(head)) else ""
    website = ""
    for m in WEBSITE.finditer(head):
        if "linkedin" not in m.group().lower():
            website = m.group()
            break

    sections = _split_sections(lines[1:])
    summary = " ".join(sections.get("summary", []))

    skills = _skills_from_section(sections.get("skills", []))
    if not skills:
        skills = find_keywords(text)

    years = [int(y) for y in YEARS.findall(text)]
    logger.debug(f"Rule parser found {len(skills)} skills and sections {list(sections)}")

    return ProcessedResumeData(
        personal_info=PersonalInfo(
            name=name,
            email=email,
            phone=phone,
            linkedin=linkedin,
            website=website,
        ),
        summary=summary,
        skills=skills,
        extracted_text=text,
        experience_years=max(years) if years else 0,
        sections=list(sections),
    )

def match_job(resume_text: str, job_description: str) -> JobMatch:
    """ATS-style score from the overlap of vocabulary skills."""
    required = find_keywords(job_description)
    present = set(find_keywords(resume_text))

    if required:
        matched = [kw for kw in required if kw in present]
        score = round(40 + 60 * len(matched) / len(required))
    else:
        jd_words = set(re.findall(r"[a-z]{4,}", job_description.lower()))
        resume_words = set(re.findall(r"[a-z]{4,}", resume_text.lower()))
        overlap = len(jd_words & resume_words) / len(jd_words) if jd_words else 0
        score = round(40 + 60 * overlap)

    suggestions = [
        f"Add concrete experience with {kw} that the role asks for"
        for kw in required if kw not in present
    ][:5]
    if score < 80:
        suggestions.append("Quantify achievements with metrics (percentages, users, revenue)")
        suggestions.append("Mirror the job description's terminology in your summary")
    if not YEARS.search(resume_text):
        suggestions.append("State your total years of experience in the summary")

    return JobMatch(ats_score=max(0, min(100, score)), suggestions=suggestions)

def skill_gap(current_skills: List[str], job_description: str) -> SkillGapAnalysis:
    """
    Compares the candidate's skills with the vocabulary skills named in the
    job description. Senior postings raise the required level.
    """
    lower_jd = job_description.lower()
    required_level = 8 if any(w in lower_jd for w in ("senior", "lead", "expert")) else 7
    required_names = find_keywords(job_description)

    current_lower = {s.lower() for s in current_skills}
    current = [
        SkillLevel(skill=s, level=7 if s.lower() in lower_jd else 6)
        for s in current_skills[:10]
    ]
    required = [SkillLevel(skill=s, level=required_level) for s in required_names]
    missing = [s for s in required_names if s.lower() not in current_lower]

    if required_names:
        match = round(100 * (len(required_names) - len(missing)) / len(required_names))
    else:
        match = 100

    return SkillGapAnalysis(
        match_percentage=match,
        current_skills=current,
        required_skills=required,
        missing_skills=missing,
    )

def learning_path(missing_skills: List[str], level: str = "intermediate") -> LearningPath:
    """One course per missing skill plus a capstone project."""
    tasks = []
    focus = missing_skills[:5]
    for skill in focus:
        tasks.append(LearningTask(
            id=len(tasks) + 1,
            title=f"{skill} fundamentals",
            description=f"Complete a course covering {skill} at {level} level",
            duration="2 weeks",
            type="course",
        ))
    if focus:
        tasks.append(LearningTask(
            id=len(tasks) + 1,
            title="Portfolio project",
            description=f"Build and publish a project that uses {', '.join(focus)}",
            duration="3 weeks",
            type="project",
        ))
    else:
        tasks.append(LearningTask(
            id=1,
            title="Deepen your strongest skills",
            description="Pick one core skill and write up a case study of your best work with it",
            duration="1 week",
            type="other",
        ))

    weeks = sum(int(t.duration.split()[0]) for t in tasks)
    title = f"{level.capitalize()} path: {', '.join(focus)}" if focus else f"{level.capitalize()} path: polish and showcase"
    return LearningPath(title=title, duration=f"{weeks} weeks", tasks=tasks)

def _career_stage(years: int) -> str:
    if years < 2:
        return "Early Career"
    if years < 5:
        return "Mid-Level"
    if years < 10:
        return "Senior"
    return "Leadership"

def career_profile(processed: ProcessedResumeData) -> CareerDNA:
    """Archetype from the dominant skill category, stage from years of experience."""
    counts: Dict[str, int] = {}
    for skill in list(processed.skills) + find_keywords(processed.extracted_text):
        category = category_of(skill)
        if category:
            counts[category] = counts.get(category, 0) + 1

    ranked = sorted(counts, key=lambda c: counts[c], reverse=True)
    if ranked:
        archetype, roles = ARCHETYPES[ranked[0]]
    else:
        archetype, roles = "The Generalist", ["Operations Specialist", "Project Coordinator"]

    strengths = [CATEGORY_LABELS[c] for c in ranked[:3]]
    growth = [CATEGORY_LABELS[c] for c in CATEGORY_LABELS if c not in counts][:3]

    return CareerDNA(
        archetype=archetype,
        strengths=strengths,
        growth_areas=growth,
        career_stage=_career_stage(processed.experience_years),
        recommended_roles=list(roles),
    )

def interview_questions(job_description: str, skills: List[str]) -> List[str]:
    questions = [
        "Tell me about yourself and why this role interests you.",
        "Describe a project you are proud of and your specific contribution.",
    ]
    required = find_keywords(job_description)
    for skill in (required or skills)[:3]:
        questions.append(f"Walk me through a time you used {skill} to solve a real problem.")
    questions.append("Tell me about a time you disagreed with a teammate and how you resolved it.")
    questions.append("Where do you see the biggest challenge in this role during the first 90 days?")
    return questions

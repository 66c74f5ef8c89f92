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
Client for the resume analysis service.
Supports Google AI Studio (google-genai) and OpenAI. Without an API key, or
when a provider call fails, every operation falls back to the offline
heuristics in career_forge.heuristics.
"""

import json
import logging
from typing import List, Optional

from career_forge import heuristics
from career_forge.config import Settings
from career_forge.errors import AnalysisError, ParseError
from career_forge.models import (
    CareerDNA,
    JobMatch,
    LearningPath,
    LearningTask,
    PersonalInfo,
    ProcessedResumeData,
    SkillGapAnalysis,
    SkillLevel,
    TASK_TYPES,
)

# Logger is configured in main.py
logger = logging.getLogger(__name__)

DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}

def _clamp(value, low: int, high: int) -> int:
    return max(low, min(high, int(value)))

class AnalysisClient:
    """
    Abstraction layer over the LLM providers.
    Each public method maps to one analysis contract and returns a model
    object; malformed provider output raises ParseError / AnalysisError.
    """
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.provider = self.settings.provider
        self.api_key = self.settings.api_key
        if not self.api_key:
            logger.warning("No API key found. Analysis will use offline heuristics.")

    @property
    def model(self) -> str:
        return self.settings.model or DEFAULT_MODELS.get(self.provider, DEFAULT_MODELS["gemini"])

    def _call_llm(self, prompt: str) -> Optional[str]:
        """
        Sends a prompt to the configured provider.
        Returns None when no provider is usable, signalling the caller to
        use the heuristic fallback.
        """
        if not self.api_key:
            return None

        # Ensure custom CA bundle is visible to httpx-based SDKs
        self.settings.configure_ssl_env()

        try:
            if self.provider == "openai":
                import openai
                client = openai.OpenAI(api_key=self.api_key)
                response = client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=0.2
                )
                return response.choices[0].message.content

            from google import genai
            client = genai.Client(api_key=self.api_key)
            response = client.models.generate_content(model=self.model, contents=prompt)
            return response.text

        except ImportError as e:
            logger.error(f"Missing dependency for provider {self.provider}: {e}")
            return None
        except Exception as e:
            logger.error(f"LLM call failed: {e}. Falling back to heuristics.")
            return None

    def _clean_json(self, text: str) -> str:
        """Helper to strip code fences from LLM output"""
        if "```json" in text:
            text = text.split("```json")[1].split("```")[0]
        elif "```" in text:
            text = text.split("```")[1].split("```")[0]
        return text.strip()

    def _ask_json(self, prompt: str):
        """Returns decoded JSON, None for fallback; raises ValueError on garbage."""
        reply = self._call_llm(prompt)
        if reply is None:
            return None
        data = json.loads(self._clean_json(reply))
        if not isinstance(data, (dict, list)):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def parse_resume(self, text: str) -> ProcessedResumeData:
        """
        Turns extracted resume text into ProcessedResumeData.
        """
        if not text or not text.strip():
            raise ParseError("No text to parse")

        prompt = f"""
        You are an expert resume parser. Extract the candidate's details from the resume below.

        Return ONLY valid JSON in this format:
        {{
            "personalInfo": {{"name": "", "email": "", "phone": "", "location": "", "linkedin": "", "website": ""}},
            "summary": "2-3 sentence professional summary",
            "skills": ["Skill 1", "Skill 2"],
            "experienceYears": 0
        }}

        RESUME:
        {text[:20000]}
        """
        try:
            data = self._ask_json(prompt)
        except ValueError as e:
            raise ParseError(f"Failed to decode LLM response for resume parsing: {e}") from e

        fallback = heuristics.parse_resume_text(text)
        if data is None:
            return fallback

        try:
            info = data.get("personalInfo") or {}
            return ProcessedResumeData(
                personal_info=PersonalInfo(
                    name=str(info.get("name") or fallback.personal_info.name),
                    email=str(info.get("email") or fallback.personal_info.email),
                    phone=str(info.get("phone") or fallback.personal_info.phone),
                    location=str(info.get("location") or ""),
                    linkedin=str(info.get("linkedin") or fallback.personal_info.linkedin),
                    website=str(info.get("website") or fallback.personal_info.website),
                ),
                summary=str(data.get("summary") or fallback.summary),
                skills=[str(s) for s in data.get("skills") or fallback.skills],
                extracted_text=text,
                experience_years=int(data.get("experienceYears") or fallback.experience_years),
                sections=fallback.sections,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ParseError(f"Failed to map LLM response to resume data: {e}") from e

    def match_job(self, resume_text: str, job_description: str) -> JobMatch:
        prompt = f"""
        You are an Applicant Tracking System. Score how well the resume matches the job (0-100)
        and give up to 6 concrete suggestions to improve the match.

        Return ONLY valid JSON: {{"atsScore": 0, "suggestions": ["..."]}}

        JOB DESCRIPTION:
        {job_description[:4000]}

        RESUME:
        {resume_text[:20000]}
        """
        try:
            data = self._ask_json(prompt)
            if data is None:
                return heuristics.match_job(resume_text, job_description)
            return JobMatch(
                ats_score=_clamp(data["atsScore"], 0, 100),
                suggestions=[str(s) for s in data.get("suggestions", [])],
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise AnalysisError(f"Invalid job match response: {e}", facet="match") from e

    def skill_gap(self, current_skills: List[str], job_description: str) -> SkillGapAnalysis:
        prompt = f"""
        Compare the candidate's skills with the job requirements. Rate levels from 0 to 10.

        Return ONLY valid JSON:
        {{
            "matchPercentage": 0,
            "currentSkills": [{{"skill": "Python", "level": 7}}],
            "requiredSkills": [{{"skill": "Python", "level": 8}}],
            "missingSkills": ["Kubernetes"]
        }}

        CANDIDATE SKILLS: {', '.join(current_skills)}

        JOB DESCRIPTION:
        {job_description[:4000]}
        """
        try:
            data = self._ask_json(prompt)
            if data is None:
                return heuristics.skill_gap(current_skills, job_description)

            def levels(items):
                return [SkillLevel(skill=str(i["skill"]), level=_clamp(i["level"], 0, 10)) for i in items]

            return SkillGapAnalysis(
                match_percentage=_clamp(data["matchPercentage"], 0, 100),
                current_skills=levels(data.get("currentSkills", [])),
                required_skills=levels(data.get("requiredSkills", [])),
                missing_skills=[str(s) for s in data.get("missingSkills", [])],
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise AnalysisError(f"Invalid skill gap response: {e}", facet="skill_gap") from e

    def learning_path(self, missing_skills: List[str], level: str = "intermediate") -> LearningPath:
        prompt = f"""
        Design a learning path for a {level} professional who needs these skills: {', '.join(missing_skills) or 'none'}.
        Each task has a type of "course", "project" or "other".

        Return ONLY valid JSON:
        {{
            "title": "Path title",
            "duration": "8 weeks",
            "tasks": [{{"title": "", "description": "", "duration": "2 weeks", "type": "course"}}]
        }}
        """
        try:
            data = self._ask_json(prompt)
            if data is None:
                return heuristics.learning_path(missing_skills, level)

            tasks = []
            for i, raw in enumerate(data.get("tasks", []), start=1):
                task_type = str(raw.get("type", "other")).lower()
                tasks.append(LearningTask(
                    id=i,
                    title=str(raw.get("title", "")),
                    description=str(raw.get("description", "")),
                    duration=str(raw.get("duration", "")),
                    type=task_type if task_type in TASK_TYPES else "other",
                ))
            return LearningPath(
                title=str(data.get("title", "Learning path")),
                duration=str(data.get("duration", "")),
                tasks=tasks,
            )
        except (ValueError, TypeError, AttributeError) as e:
            raise AnalysisError(f"Invalid learning path response: {e}", facet="learning_path") from e

    def career_profile(self, processed: ProcessedResumeData) -> CareerDNA:
        prompt = f"""
        You are a career coach. Derive a career profile from this resume.

        Return ONLY valid JSON:
        {{
            "archetype": "The Builder",
            "strengths": [""],
            "growthAreas": [""],
            "careerStage": "Mid-Level",
            "recommendedRoles": [""]
        }}

        SUMMARY: {processed.summary}
        SKILLS: {', '.join(processed.skills)}
        RESUME:
        {processed.extracted_text[:20000]}
        """
        try:
            data = self._ask_json(prompt)
            if data is None:
                return heuristics.career_profile(processed)
            return CareerDNA(
                archetype=str(data["archetype"]),
                strengths=[str(s) for s in data.get("strengths", [])],
                growth_areas=[str(s) for s in data.get("growthAreas", [])],
                career_stage=str(data.get("careerStage", "")),
                recommended_roles=[str(s) for s in data.get("recommendedRoles", [])],
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise AnalysisError(f"Invalid career profile response: {e}", facet="career_dna") from e

    def interview_questions(self, job_description: str, skills: List[str]) -> List[str]:
        prompt = f"""
        You are a hiring manager. Write 6-8 interview questions for this role, mixing
        technical questions about the candidate's skills with behavioural ones.

        Return ONLY valid JSON: {{"questions": ["..."]}}

        CANDIDATE SKILLS: {', '.join(skills)}
        JOB DESCRIPTION:
        {job_description[:4000]}
        """
        try:
            data = self._ask_json(prompt)
            if data is None:
                return heuristics.interview_questions(job_description, skills)
            questions = data["questions"] if isinstance(data, dict) else data
            return [str(q) for q in questions]
        except (ValueError, KeyError, TypeError) as e:
            raise AnalysisError(f"Invalid interview questions response: {e}", facet="interview_questions") from e

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
Terminal rendering of the session. Views only read state.
"""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from career_forge import insights
from career_forge.ingest import format_file_size
from career_forge.session import CareerSession

BAND_STYLES = {"good": "green", "fair": "yellow", "poor": "red"}

RECENT_AWARDS = 5

TABS = ("dashboard", "upload", "builder", "optimizer", "skills", "growth",
        "simulator", "dna", "interview", "salary")

def _bar(value: float, width: int = 20, style: str = "blue") -> Text:
    filled = int(round(width * max(0, min(100, value)) / 100))
    return Text("█" * filled, style=style) + Text("░" * (width - filled), style="grey50")

def _empty(message: str) -> Panel:
    return Panel(Text(message, style="dim"))

def _missing_facet(session: CareerSession, facet: str, label: str, message: str) -> Panel:
    error = session.results.error_for(facet)
    if error:
        return Panel(Text(f"{label} failed: {error}", style="bold red"))
    return _empty(message)

def render_dashboard(session: CareerSession):
    stats = Table.grid(padding=(0, 4))
    stats.add_row("Level", "XP", "ATS Score", "Skills")
    score = session.results.ats_score
    stats.add_row(
        Text(str(session.xp.level), style="bold orange1"),
        Text(str(session.xp.xp), style="bold"),
        Text(f"{score}%" if score is not None else "--%", style="bold blue"),
        Text(str(len(session.builder.data.skills)), style="bold"),
    )
    body = [stats, Text(""), Text("Progress to next level "), _bar(session.xp.progress_in_level)]
    recent = session.xp.history[-RECENT_AWARDS:]
    if recent:
        body += [Text(""), Text("Recent XP", style="bold")]
        body += [Text(f"+{int(reward)} {reward.name.lower()} (total {total})") for reward, total in reversed(recent)]
    return Panel(Group(*body), title="Dashboard")

def render_upload(session: CareerSession):
    upload = session.upload
    if upload.error:
        body = Text(upload.error, style="bold red")
    elif upload.processing:
        body = Group(Text("Processing resume..."), _bar(upload.progress))
    elif upload.file:
        body = Text(f"✓ {upload.file.name} ({format_file_size(upload.file.size)})", style="green")
    else:
        body = Text("No resume uploaded. Supports PDF, DOC, DOCX, TXT (max 10MB)", style="dim")
    return Panel(body, title="Upload Resume")

def render_builder(session: CareerSession):
    data = session.builder.data
    info = data.personal_info
    lines = [Text(info.name or "Your Name", style="bold")]
    contact = " | ".join(v for v in (info.email, info.phone, info.location) if v)
    if contact:
        lines.append(Text(contact, style="dim"))
    if data.summary:
        lines += [Text(""), Text("PROFESSIONAL SUMMARY", style="bold"), Text(data.summary)]
    if data.experience:
        lines += [Text(""), Text("EXPERIENCE", style="bold")]
        for job in data.experience:
            lines.append(Text(f"{job.title or 'Job Title'} | {job.company} | {job.duration}"))
    if data.education:
        lines += [Text(""), Text("EDUCATION", style="bold")]
        for edu in data.education:
            lines.append(Text(f"{edu.degree or 'Degree'} | {edu.institution} | {edu.year}"))
    if data.skills:
        lines += [Text(""), Text("SKILLS", style="bold"), Text(", ".join(data.skills))]
    if data.projects:
        lines += [Text(""), Text("PROJECTS", style="bold")]
        for project in data.projects:
            lines.append(Text(project.name or "Project Name"))
    return Panel(Group(*lines), title=f"Resume Preview (step: {session.builder.step.value})")

def render_optimizer(session: CareerSession):
    results = session.results
    if results.match is None:
        return _missing_facet(session, "match", "Match analysis", "Analyze a job description to see your ATS score")
    score = results.match.ats_score
    band = insights.score_band(score)
    body = [
        Text(f"{score}%", style=f"bold {BAND_STYLES[band]}"),
        _bar(score, style=BAND_STYLES[band]),
        Text(insights.score_verdict(score)),
        Text(""),
    ]
    body += [Text(f"• {s}") for s in results.suggestions]
    return Panel(Group(*body), title="Smart Optimizer")

def render_skill_gap(session: CareerSession):
    gap = session.results.skill_gap
    if gap is None:
        return _missing_facet(session, "skill_gap", "Skill gap analysis", "No skill gap analysis yet")
    table = Table(title=f"{gap.match_percentage}% Match")
    table.add_column("Skill")
    table.add_column("Current", justify="right")
    table.add_column("Required", justify="right")
    table.add_column("Gap")
    for row in insights.skill_gap_rows(gap):
        status = Text("✓ Met", style="green") if row.met else Text(f"Gap: {row.gap}", style="orange1")
        table.add_row(row.skill, str(row.current), str(row.required), status)
    missing = Text("Skills to develop: " + (", ".join(gap.missing_skills[:6]) or "none"), style="red")
    return Panel(Group(table, missing), title="Skill Gap Analysis")

def render_growth(session: CareerSession):
    path = session.results.learning_path
    if path is None:
        return _missing_facet(session, "learning_path", "Learning path", "No learning path yet")
    table = Table(title=f"{path.title} ({path.duration})")
    table.add_column("#", justify="right")
    table.add_column("Task")
    table.add_column("Type")
    table.add_column("Duration")
    table.add_column("Done")
    for task in path.tasks:
        table.add_row(str(task.id), task.title, task.type, task.duration, "✓" if task.completed else "")
    return Panel(table, title="Growth Engine")

def render_simulator(session: CareerSession):
    sim = session.simulator
    if not sim.heatmap:
        return _empty("Run the recruiter simulator to see where attention goes")
    table = Table()
    table.add_column("Section")
    table.add_column("Attention")
    for point in sim.heatmap:
        table.add_row(point.section, Group(_bar(point.attention, style="red"), Text(f"{point.attention}%")))
    return Panel(table, title="Recruiter Simulator")

def render_dna(session: CareerSession):
    dna = session.results.career_dna
    if dna is None:
        return _missing_facet(session, "career_dna", "Career DNA", "Upload your resume and analyze a job to generate your Career DNA")
    body = Group(
        Text(dna.archetype, style="bold magenta"),
        Text(f"Career stage: {dna.career_stage}"),
        Text("Strengths: " + ", ".join(dna.strengths)),
        Text("Growth areas: " + ", ".join(dna.growth_areas)),
        Text("Recommended roles: " + ", ".join(dna.recommended_roles)),
    )
    return Panel(body, title="Career DNA")

def render_interview(session: CareerSession):
    questions = session.results.interview_questions
    if not questions:
        return _missing_facet(session, "interview_questions", "Interview questions", "No interview questions yet")
    return Panel(Group(*(Text(f"{i}. {q}") for i, q in enumerate(questions, start=1))), title="Interview Prep")

def render_salary(session: CareerSession):
    if session.processed is None:
        return _empty("Please upload your resume to get salary insights")
    headline = Table.grid(padding=(0, 4))
    headline.add_row("Estimated Base", "Market Average", "Target")
    headline.add_row(*(insights.format_currency(v) for v in (
        insights.ESTIMATED_BASE_SALARY, insights.MARKET_AVERAGE_SALARY, insights.TARGET_SALARY)))

    bands = Table(title="Salary Range Analysis")
    for column in ("Level", "Minimum", "Average", "Maximum"):
        bands.add_column(column)
    for band in insights.SALARY_BANDS:
        bands.add_row(band.level, *(insights.format_currency(v) for v in (band.min, band.avg, band.max)))

    value = Table(title="Skills Market Value")
    value.add_column("Skill")
    value.add_column("Demand", justify="right")
    value.add_column("Impact", justify="right")
    for item in insights.skill_market_value(session.processed.skills):
        value.add_row(item.skill, f"{item.demand}%", f"+{insights.format_currency(item.salary_impact)}")
    return Panel(Group(headline, bands, value), title="Salary Insights")

RENDERERS = {
    "dashboard": render_dashboard,
    "upload": render_upload,
    "builder": render_builder,
    "optimizer": render_optimizer,
    "skills": render_skill_gap,
    "growth": render_growth,
    "simulator": render_simulator,
    "dna": render_dna,
    "interview": render_interview,
    "salary": render_salary,
}

def show(session: CareerSession, tabs=TABS, console: Console = None):
    console = console or Console()
    for tab in tabs:
        console.print(RENDERERS[tab](session))

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
Main entry point for the Career Forge CLI.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from career_forge.builder import BuilderStep, ResumeBuilder
from career_forge.config import Settings
from career_forge.errors import CareerForgeError
from career_forge.generator import ResumeExporter
from career_forge.ingest import ResumeFile, read_job_description
from career_forge.session import CareerSession
from career_forge.views import TABS, show

logger = logging.getLogger(__name__)

# Field order for the pipe-separated --experience / --education / --project values
ENTRY_FIELDS = {
    "experience": ("title", "company", "duration", "description"),
    "education": ("degree", "institution", "year", "gpa"),
    "projects": ("name", "description", "technologies", "link"),
}

def setup_logging(verbosity: int, quiet: bool = False, data_dir: str = "user_content", console: Console = None):
    """
    Configures logging:
    - File: <data_dir>/logs/career_forge.log (DEBUG)
    - Console: Default=ERROR via rich, -q=ERROR, -v=WARNING, -vv=INFO, -vvv=DEBUG
    """
    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "career_forge.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG) # Capture everything at root

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root.addHandler(file_handler)

    if quiet or verbosity == 0:
        level = logging.ERROR
    elif verbosity == 1:
        level = logging.WARNING
    elif verbosity == 2:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console_handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    # Silence some noisy libs if not in super debug
    if verbosity < 3:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

def _field_assignment(value: str):
    field_name, sep, field_value = value.partition("=")
    if not sep or not field_name.strip():
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got '{value}'")
    return field_name.strip(), field_value.strip()

def _add_entry(builder: ResumeBuilder, kind: str, raw: str):
    add, update = {
        "experience": (builder.add_experience, builder.update_experience),
        "education": (builder.add_education, builder.update_education),
        "projects": (builder.add_project, builder.update_project),
    }[kind]
    entry = add()
    for field_name, value in zip(ENTRY_FIELDS[kind], raw.split("|")):
        if value.strip():
            update(entry.id, field_name, value.strip())

def apply_edits(builder: ResumeBuilder, args):
    """
    Walks the builder steps in order, applying the edits given on the
    command line, and leaves it on the preview step.
    """
    if args.blank:
        builder.reset()

    builder.go_to(BuilderStep.PERSONAL)
    for field_name, value in args.set_info:
        builder.update_personal_info(field_name, value)

    builder.next_step()
    if args.summary is not None:
        builder.set_summary(args.summary)

    builder.next_step()
    for raw in args.experience:
        _add_entry(builder, "experience", raw)

    builder.next_step()
    for raw in args.education:
        _add_entry(builder, "education", raw)

    builder.next_step()
    for skill in args.add_skill:
        builder.add_skill(skill)
    for skill in args.remove_skill:
        builder.remove_skill(skill)

    builder.next_step()
    for raw in args.project:
        _add_entry(builder, "projects", raw)

    builder.go_to(BuilderStep.PREVIEW)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Career Forge: resume analysis and career insights")
    parser.add_argument("resume", help="Resume file to upload (.pdf, .doc, .docx, .txt)")
    parser.add_argument("--jd", help="URL or file path to a Job Description to analyze against")
    parser.add_argument("--add-skill", action="append", default=[], metavar="SKILL", help="Add a skill in the builder (repeatable)")
    parser.add_argument("--remove-skill", action="append", default=[], metavar="SKILL", help="Remove a skill in the builder (repeatable)")
    parser.add_argument("--blank", action="store_true", help="Start the builder from an empty resume instead of the uploaded one")
    parser.add_argument("--set-info", action="append", type=_field_assignment, default=[], metavar="FIELD=VALUE", help="Set a personal info field: name, email, phone, location, linkedin, website (repeatable)")
    parser.add_argument("--summary", help="Replace the professional summary")
    parser.add_argument("--experience", action="append", default=[], metavar="ENTRY", help="Add experience as 'title|company|duration|description' (repeatable)")
    parser.add_argument("--education", action="append", default=[], metavar="ENTRY", help="Add education as 'degree|institution|year|gpa' (repeatable)")
    parser.add_argument("--project", action="append", default=[], metavar="ENTRY", help="Add a project as 'name|description|technologies|link' (repeatable)")
    parser.add_argument("--complete-task", action="append", type=int, default=[], metavar="ID", help="Mark a learning path task complete (repeatable)")
    parser.add_argument("--simulate", action="store_true", help="Run the recruiter simulator")
    parser.add_argument("--export", metavar="PATH", help="Export the built resume to a DOCX file")
    parser.add_argument("--show", nargs="+", choices=TABS, default=list(TABS), metavar="TAB", help=f"Views to render (default: all). Choices: {', '.join(TABS)}")
    parser.add_argument("--real-extraction", action="store_true", help="Parse PDF/DOCX uploads instead of using sample transcripts")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=WARNING, -vv=INFO, -vvv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status output (ERROR only)")
    parser.add_argument("--ca-bundle", help="Path to a custom CA certificate bundle for HTTPS verification (proxy environments)")
    return parser

async def run(args, settings: Settings, console: Console) -> int:
    """
    Drives one session from the command line: upload, optional edits and
    analysis, then renders the requested views.
    """
    session = CareerSession(settings)

    try:
        resume_file = ResumeFile.from_path(args.resume)
    except OSError as e:
        logger.error(f"Cannot open resume {args.resume}: {e}")
        return 1

    with console.status("Processing resume..."):
        await session.handle_upload(resume_file)
    if session.upload.error:
        logger.error(session.upload.error)
        show(session, ["upload"], console)
        return 1

    apply_edits(session.builder, args)

    if args.jd:
        jd_text = read_job_description(args.jd, settings)
        if not jd_text.strip():
            logger.error("Could not extract text from the job description.")
            return 1
        with console.status("Analyzing job match..."):
            await session.analyze_job(jd_text)

    for task_id in args.complete_task:
        if not session.complete_task(task_id):
            logger.warning(f"Learning task {task_id} was not completed (unknown or already done)")

    if args.simulate:
        with console.status("Recruiter is scanning your resume..."):
            await session.run_simulator()

    show(session, args.show, console)

    if args.export:
        try:
            ResumeExporter().generate(session.builder.data, args.export)
        except OSError as e:
            logger.error(f"Error exporting resume: {e}")
            return 1
        console.print(f"[green]Exported resume to {args.export}[/green]")

    return 0

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env(ca_bundle=args.ca_bundle)
    if args.real_extraction:
        settings.real_extraction = True

    console = Console()
    setup_logging(args.verbose, quiet=args.quiet, data_dir=settings.data_dir)

    try:
        code = asyncio.run(run(args, settings, console))
    except KeyboardInterrupt:
        # Use stderr so it captures attention even if stdout is redirected
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)
    except CareerForgeError as e:
        logger.error(str(e))
        sys.exit(1)
    sys.exit(code)

if __name__ == "__main__":
    main()

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
Handles the "Export Resume" action: writes the builder's ResumeData to an
MS Word (DOCX) document, section by section in preview order.
"""

import logging
from docx import Document
from docx.shared import Pt
from career_forge.models import ResumeData

logger = logging.getLogger(__name__)

class ResumeExporter:
    """
    Generates a styled DOCX resume from ResumeData.
    Empty sections are skipped, as in the builder preview.
    """
    def __init__(self):
        self.styles = {
            'title': 'Title',
            'h1': 'Heading 1',
            'body': 'Normal',
            'bullet': 'List Bullet'
        }
        self.document = None

    def _setup_styles(self):
        style = self.document.styles['Normal']
        font = style.font
        font.name = 'Calibri'
        font.size = Pt(11)

    def _heading(self, text: str):
        p = self.document.add_paragraph(text, style=self.styles['h1'])
        p.paragraph_format.keep_with_next = True
        return p

    def generate(self, data: ResumeData, output_filename: str):
        """
        Main entry point to generate the document.

        Args:
            data (ResumeData): The resume as edited in the builder.
            output_filename (str): The path to save the generated DOCX.
        """
        self.document = Document()
        self._setup_styles()

        info = data.personal_info

        # --- HEADER ---
        p = self.document.add_paragraph(info.name or "Your Name")
        p.style = self.styles['title']

        contact = " | ".join(v for v in (info.email, info.phone, info.location) if v)
        if contact:
            self.document.add_paragraph(contact)
        links = " | ".join(v for v in (info.linkedin, info.website) if v)
        if links:
            self.document.add_paragraph(links)

        # --- SUMMARY ---
        if data.summary:
            self._heading('PROFESSIONAL SUMMARY')
            self.document.add_paragraph(data.summary)

        # --- EXPERIENCE ---
        if data.experience:
            self._heading('EXPERIENCE')
            for job in data.experience:
                p = self.document.add_paragraph()
                p.add_run(job.title or 'Job Title').bold = True
                if job.company:
                    p.add_run(f" | {job.company}")
                if job.duration:
                    p.add_run(f" | {job.duration}").italic = True
                p.paragraph_format.keep_with_next = True

                if job.description:
                    p = self.document.add_paragraph(job.description)
                    p.paragraph_format.widow_control = True

        # --- EDUCATION ---
        if data.education:
            self._heading('EDUCATION')
            for edu in data.education:
                p = self.document.add_paragraph()
                p.add_run(edu.degree or 'Degree').bold = True
                details = ", ".join(v for v in (edu.institution, edu.year) if v)
                if details:
                    p.add_run(f" | {details}")
                if edu.gpa:
                    p.add_run(f" | GPA: {edu.gpa}")

        # --- SKILLS ---
        if data.skills:
            self._heading('SKILLS')
            self.document.add_paragraph(", ".join(data.skills))

        # --- PROJECTS ---
        if data.projects:
            self._heading('PROJECTS')
            for project in data.projects:
                p = self.document.add_paragraph(style=self.styles['bullet'])
                p.add_run(project.name or 'Project Name').bold = True
                if project.description:
                    p.add_run(f" {project.description}")
                if project.technologies:
                    self.document.add_paragraph(f"Technologies: {project.technologies}")
                if project.link:
                    self.document.add_paragraph(project.link)

        self.document.save(output_filename)
        logger.info(f"Resume exported successfully: {output_filename}")

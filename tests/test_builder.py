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
from unittest.mock import MagicMock

from career_forge.builder import BuilderStep, IdMinter, ResumeBuilder
from career_forge.models import PersonalInfo, ProcessedResumeData, ResumeData

class TestIdMinter(unittest.TestCase):
    def test_same_millisecond_gives_distinct_increasing_ids(self):
        minter = IdMinter(clock=lambda: 1700000000.0)
        ids = [minter() for _ in range(5)]
        self.assertEqual(ids, sorted(set(ids)))
        self.assertEqual(ids[0], 1700000000000)

    def test_clock_going_backwards_stays_increasing(self):
        times = iter([2.0, 1.0])
        minter = IdMinter(clock=lambda: next(times))
        self.assertEqual(minter(), 2000)
        self.assertEqual(minter(), 2001)

class TestResumeBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = ResumeBuilder(minter=IdMinter(clock=lambda: 1.0))

    def test_adds_get_distinct_ids_in_call_order(self):
        added = [self.builder.add_experience() for _ in range(4)]
        ids = [e.id for e in self.builder.data.experience]
        self.assertEqual(ids, [e.id for e in added])
        self.assertEqual(len(set(ids)), 4)

    def test_new_entry_has_empty_fields(self):
        entry = self.builder.add_education()
        self.assertEqual((entry.degree, entry.institution, entry.year, entry.gpa), ("", "", "", ""))

    def test_update_changes_only_target(self):
        first = self.builder.add_experience()
        second = self.builder.add_experience()
        self.builder.update_experience(second.id, "title", "Engineer")

        first_now, second_now = self.builder.data.experience
        self.assertEqual(first_now, first)
        self.assertEqual(second_now.title, "Engineer")
        self.assertEqual(second_now.id, second.id)

    def test_update_unknown_id_is_noop(self):
        self.builder.add_project()
        before, version = self.builder.data, self.builder.version
        self.builder.update_project(-1, "name", "Ghost")
        self.assertIs(self.builder.data, before)
        self.assertEqual(self.builder.version, version)

    def test_update_of_id_or_unknown_field_is_ignored(self):
        entry = self.builder.add_experience()
        before = self.builder.data
        self.builder.update_experience(entry.id, "id", 42)
        self.builder.update_experience(entry.id, "salary", "lots")
        self.assertIs(self.builder.data, before)

    def test_remove_and_missing_remove(self):
        a = self.builder.add_education()
        b = self.builder.add_education()
        self.builder.remove_education(a.id)
        self.assertEqual([e.id for e in self.builder.data.education], [b.id])

        before = self.builder.data
        self.builder.remove_education(a.id)
        self.assertIs(self.builder.data, before)

    def test_every_mutation_produces_new_value(self):
        original = self.builder.data
        self.builder.add_skill("Python")
        self.assertIsNot(self.builder.data, original)
        self.assertEqual(original.skills, ())
        self.assertEqual(self.builder.version, 1)

    def test_listeners_receive_new_data(self):
        listener = MagicMock()
        self.builder.subscribe(listener)
        self.builder.set_summary("Builder of things")
        listener.assert_called_once_with(self.builder.data)

    def test_add_then_remove_skill_restores_list(self):
        self.builder.add_skill("Python")
        before = self.builder.data.skills
        self.builder.add_skill("  Rust ")
        self.assertEqual(self.builder.data.skills, ("Python", "Rust"))
        self.builder.remove_skill("Rust")
        self.assertEqual(self.builder.data.skills, before)

    def test_add_skill_ignores_blank_and_duplicates(self):
        self.builder.add_skill("Python")
        version = self.builder.version
        self.builder.add_skill("Python")
        self.builder.add_skill("   ")
        self.assertEqual(self.builder.data.skills, ("Python",))
        self.assertEqual(self.builder.version, version)

    def test_remove_missing_skill_is_noop(self):
        self.builder.remove_skill("COBOL")
        self.assertEqual(self.builder.version, 0)

    def test_update_personal_info(self):
        self.builder.update_personal_info("email", "jane@x.com")
        self.assertEqual(self.builder.data.personal_info.email, "jane@x.com")
        self.builder.update_personal_info("twitter", "@jane")
        self.assertFalse(hasattr(self.builder.data.personal_info, "twitter"))

    def test_steps_clamp_at_both_ends(self):
        self.assertEqual(self.builder.previous_step(), BuilderStep.PERSONAL)
        for _ in range(10):
            self.builder.next_step()
        self.assertEqual(self.builder.step, BuilderStep.PREVIEW)
        self.builder.go_to("skills")
        self.assertEqual(self.builder.step, BuilderStep.SKILLS)

    def test_fields_stay_editable_on_any_step(self):
        self.builder.go_to(BuilderStep.PREVIEW)
        entry = self.builder.add_experience()
        self.builder.update_experience(entry.id, "company", "Acme")
        self.assertEqual(self.builder.data.experience[0].company, "Acme")

    def test_import_processed_seeds_scalars_and_skills(self):
        entry = self.builder.add_experience()
        processed = ProcessedResumeData(
            personal_info=PersonalInfo(name="Jane Doe", email="jane@x.com"),
            summary="Engineer",
            skills=["Python", "SQL", "Python", ""],
            extracted_text="Jane Doe",
        )
        self.builder.import_processed(processed)
        data = self.builder.data
        self.assertEqual(data.personal_info.name, "Jane Doe")
        self.assertEqual(data.summary, "Engineer")
        self.assertEqual(data.skills, ("Python", "SQL"))
        self.assertEqual(data.experience, (entry,))

    def test_reset(self):
        self.builder.add_skill("Python")
        self.builder.next_step()
        self.builder.reset()
        self.assertEqual(self.builder.data, ResumeData())
        self.assertEqual(self.builder.step, BuilderStep.PERSONAL)

if __name__ == '__main__':
    unittest.main()

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

from career_forge.gamification import Reward, XPTracker, level_for

class TestLevels(unittest.TestCase):
    def test_level_table(self):
        for xp, level in [(0, 1), (499, 1), (500, 2), (999, 2), (1000, 3)]:
            self.assertEqual(level_for(xp), level, f"xp={xp}")

class TestXPTracker(unittest.TestCase):
    def test_rewards_accumulate(self):
        tracker = XPTracker()
        tracker.award(Reward.UPLOAD)
        tracker.award(Reward.ANALYSIS)
        tracker.award(Reward.TASK)
        tracker.award(Reward.SIMULATOR)
        self.assertEqual(tracker.xp, 500)
        self.assertEqual(tracker.level, 2)
        self.assertEqual(tracker.progress_in_level, 0)
        self.assertEqual([r for r, _ in tracker.history],
                         [Reward.UPLOAD, Reward.ANALYSIS, Reward.TASK, Reward.SIMULATOR])

    def test_listeners_get_xp_and_level(self):
        tracker = XPTracker()
        listener = MagicMock()
        tracker.subscribe(listener)
        tracker.award(Reward.UPLOAD)
        listener.assert_called_once_with(100, 1)
        self.assertEqual(tracker.progress_in_level, 20)

if __name__ == '__main__':
    unittest.main()

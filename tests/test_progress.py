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

import asyncio
import unittest

from career_forge.progress import ProgressTicker

class TestProgressTicker(unittest.IsolatedAsyncioTestCase):
    async def test_ticks_up_to_cap(self):
        values = []
        ticker = ProgressTicker(values.append, step=10, interval=0, cap=90)
        async with ticker:
            await ticker.wait()
        self.assertEqual(values, [10, 20, 30, 40, 50, 60, 70, 80, 90])
        self.assertFalse(ticker.running)

    async def test_last_step_is_clamped(self):
        values = []
        ticker = ProgressTicker(values.append, step=40, interval=0, cap=90)
        async with ticker:
            await ticker.wait()
        self.assertEqual(values, [40, 80, 90])

    async def test_cancelled_when_body_raises(self):
        values = []
        ticker = ProgressTicker(values.append, step=10, interval=10, cap=90)
        with self.assertRaises(RuntimeError):
            async with ticker:
                self.assertTrue(ticker.running)
                raise RuntimeError("boom")
        self.assertFalse(ticker.running)
        await asyncio.sleep(0)
        self.assertEqual(values, [])

    def test_non_positive_step_is_rejected(self):
        for step in (0, -2):
            with self.assertRaises(ValueError):
                ProgressTicker(lambda value: None, step=step)

if __name__ == '__main__':
    unittest.main()

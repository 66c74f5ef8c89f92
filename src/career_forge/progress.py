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
Cosmetic progress indicator driven by a repeating timer.
"""

import asyncio
import contextlib
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

class ProgressTicker:
    """
    Advances a percentage by `step` every `interval` seconds until it reaches
    `cap`, reporting each value through `on_update`.

    Use as an async context manager; the timer task is cancelled on exit
    whether the body succeeded, raised or was itself cancelled.

        async with ProgressTicker(set_progress, step=10, interval=0.2, cap=90):
            await slow_work()
    """
    def __init__(self, on_update: Callable[[int], None], step: int = 10,
                 interval: float = 0.2, cap: int = 90, start: int = 0):
        if step <= 0:
            raise ValueError(f"Progress step must be positive, got {step}")
        self.on_update = on_update
        self.step = step
        self.interval = interval
        self.cap = cap
        self.value = start
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self):
        while self.value < self.cap:
            await asyncio.sleep(self.interval)
            self.value = min(self.value + self.step, self.cap)
            self.on_update(self.value)

    def start(self):
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self):
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def wait(self):
        """Block until the ticker reaches its cap."""
        if self._task is not None:
            await self._task

    async def __aenter__(self) -> "ProgressTicker":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()
        return False

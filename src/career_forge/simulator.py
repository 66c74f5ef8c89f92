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
Recruiter simulator: a timed "six second scan" of the resume that ends
with a canned attention heatmap.
"""

import logging
from typing import Callable, List, Optional

from career_forge.config import Settings
from career_forge.errors import OperationInProgressError
from career_forge.gamification import Reward, XPTracker
from career_forge.models import HeatmapPoint
from career_forge.progress import ProgressTicker

logger = logging.getLogger(__name__)

HEATMAP = (
    HeatmapPoint(section="Name", attention=95, x=20, y=10),
    HeatmapPoint(section="Contact", attention=85, x=20, y=15),
    HeatmapPoint(section="Summary", attention=70, x=20, y=25),
    HeatmapPoint(section="Experience", attention=90, x=20, y=40),
    HeatmapPoint(section="Skills", attention=80, x=20, y=70),
    HeatmapPoint(section="Education", attention=60, x=20, y=85),
)

class RecruiterSimulator:
    def __init__(self, xp: XPTracker, settings: Optional[Settings] = None,
                 on_progress: Optional[Callable[[int], None]] = None):
        self.xp = xp
        self.settings = settings or Settings()
        self.on_progress = on_progress
        self.running = False
        self.progress = 0
        self.heatmap: List[HeatmapPoint] = []

    def _set_progress(self, value: int):
        self.progress = value
        if self.on_progress:
            self.on_progress(value)

    async def run(self) -> List[HeatmapPoint]:
        """
        Scans from 0 to 100% on a fixed timer, then publishes the heatmap
        and awards simulator XP. Only one scan may run at a time.
        """
        if self.running:
            raise OperationInProgressError("Recruiter simulation already running")

        self.running = True
        self._set_progress(0)
        try:
            ticker = ProgressTicker(
                self._set_progress,
                step=self.settings.simulator_step,
                interval=self.settings.simulator_interval,
                cap=100,
            )
            async with ticker:
                await ticker.wait()
            self.heatmap = list(HEATMAP)
            self.xp.award(Reward.SIMULATOR)
            logger.info("Recruiter scan complete")
            return self.heatmap
        finally:
            self.running = False

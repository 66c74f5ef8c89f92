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
Experience points and levels.
"""

import logging
from enum import IntEnum
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 500

class Reward(IntEnum):
    """Fixed XP granted per user action."""
    UPLOAD = 100
    ANALYSIS = 200
    TASK = 50
    SIMULATOR = 150

def level_for(xp: int) -> int:
    return xp // XP_PER_LEVEL + 1

class XPTracker:
    """
    Accumulates XP. The counter only ever grows, so the derived level never
    decreases. Listeners receive (xp, level) after every award.
    """
    def __init__(self):
        self.xp = 0
        self.history: List[Tuple[Reward, int]] = []
        self._listeners: List[Callable[[int, int], None]] = []

    @property
    def level(self) -> int:
        return level_for(self.xp)

    @property
    def progress_in_level(self) -> float:
        """Percent of the way to the next level."""
        return (self.xp % XP_PER_LEVEL) / XP_PER_LEVEL * 100

    def subscribe(self, listener: Callable[[int, int], None]):
        self._listeners.append(listener)

    def award(self, reward: Reward) -> int:
        before = self.level
        self.xp += int(reward)
        self.history.append((reward, self.xp))
        logger.info(f"+{int(reward)} XP for {reward.name.lower()} (total {self.xp})")
        if self.level > before:
            logger.info(f"Level up! Now level {self.level}")
        for listener in self._listeners:
            listener(self.xp, self.level)
        return self.xp

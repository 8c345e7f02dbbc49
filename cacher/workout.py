"""
Workout Planner

Builds a workout plan from an intensity level. The intensity lookup is a
deliberately slow calculation, wrapped in an Evaluator so a plan never
pays for the same intensity twice.
"""

import logging
import time
from typing import List, Optional

from .cache.evaluator import Evaluator
from .config.settings import settings

logger = logging.getLogger(__name__)


def simulated_expensive_calculation(intensity: int, delay: float) -> int:
    """Pretend to do expensive work, then return intensity."""
    logger.info("Calculating slowly...")
    time.sleep(delay)
    return intensity


def generate_workout(
        intensity: int,
        random_number: int,
        delay: Optional[float] = None,
) -> List[str]:
    """
    Generate the workout plan for the given intensity.

    Args:
        intensity: Requested workout intensity
        random_number: Random draw; a break is prescribed on high
            intensity days when it equals settings.WORKOUT_BREAK_NUMBER
        delay: Seconds the calculation takes (default from settings)

    Returns:
        Lines of the plan, in order
    """
    delay = delay if delay is not None else settings.WORKOUT_DELAY
    expensive_result = Evaluator(
        lambda num: simulated_expensive_calculation(num, delay)
    )

    if intensity < settings.WORKOUT_LOW_INTENSITY:
        return [
            f"Today, do {expensive_result.value(intensity)} pushups!",
            f"Next, do {expensive_result.value(intensity)} situps!",
        ]

    if random_number == settings.WORKOUT_BREAK_NUMBER:
        return ["Take a break today. Remember to stay hydrated"]

    return [f"Today, run for {expensive_result.value(intensity)} minutes!"]

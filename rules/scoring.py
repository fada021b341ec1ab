"""
Grade and points calculation for Kalamela results.

Grade thresholds (official, GradePolicy.STRICT):
- A Grade: 60% and above
- B Grade: above 50% and below 60%
- C Grade: above 40% and below 50%
- No Grade: everything else, including exactly 50% and exactly 40%

The score-entry preview (GradePolicy.INCLUSIVE_RANGE) uses whole-mark ranges
instead: A 60+, B 50-59, C 40-49.

Points:
- Position points: 5/3/1 for 1st/2nd/3rd in individual events, 10/5/3 in group events
- Grade points: 5/3/1 for A/B/C, individual events only
"""

import logging
from collections import Counter
from typing import Iterable, List

from models.exceptions import DuplicatePositionError, EmptyScoreBatchError, MarksOutOfRangeError
from models.scoring import Grade, GradePolicy, ScoreInput, ScoreResult

logger = logging.getLogger(__name__)

INDIVIDUAL_POSITION_POINTS = {1: 5, 2: 3, 3: 1}
GROUP_POSITION_POINTS = {1: 10, 2: 5, 3: 3}
GRADE_POINTS = {Grade.A: 5, Grade.B: 3, Grade.C: 1, Grade.NO_GRADE: 0}

MAX_MARKS = 100


def _strict_grade(marks: float) -> Grade:
    percentage = marks / 100
    if percentage >= 0.60:
        return Grade.A
    if 0.50 < percentage < 0.60:
        return Grade.B
    if 0.40 < percentage < 0.50:
        return Grade.C
    return Grade.NO_GRADE


def _inclusive_range_grade(marks: float) -> Grade:
    if marks >= 60:
        return Grade.A
    if marks >= 50:
        return Grade.B
    if marks >= 40:
        return Grade.C
    return Grade.NO_GRADE


def calculate_grade(marks: float, policy: GradePolicy = GradePolicy.STRICT) -> Grade:
    """Grade marks out of 100. Out-of-range marks are graded as given."""
    if policy is GradePolicy.INCLUSIVE_RANGE:
        return _inclusive_range_grade(marks)
    return _strict_grade(marks)


def calculate_rank_points(position: int, is_group_event: bool = False) -> int:
    table = GROUP_POSITION_POINTS if is_group_event else INDIVIDUAL_POSITION_POINTS
    return table.get(position, 0)


def calculate_grade_points(marks: float, policy: GradePolicy = GradePolicy.INCLUSIVE_RANGE) -> int:
    """Grade bonus shown before a rank is known."""
    return GRADE_POINTS[calculate_grade(marks, policy)]


def calculate_points(marks: float, position: int, is_group_event: bool) -> ScoreResult:
    """Grade, position points and grade bonus for one result.

    The grade is always computed, but group events never earn grade points.
    """
    grade = calculate_grade(marks)
    position_points = calculate_rank_points(position, is_group_event)
    grade_points = 0 if is_group_event else GRADE_POINTS[grade]

    return ScoreResult(
        grade=grade,
        position_points=position_points,
        grade_points=grade_points,
        total_points=position_points + grade_points,
    )


def score(entry: ScoreInput) -> ScoreResult:
    return calculate_points(entry.marks, entry.position, entry.is_group_event)


def check_marks(marks: float) -> float:
    """Raise MarksOutOfRangeError unless 0 <= marks <= 100."""
    if marks < 0 or marks > MAX_MARKS:
        raise MarksOutOfRangeError(marks)
    return marks


def validate_score_batch(entries: Iterable[ScoreInput]) -> List[ScoreInput]:
    """
    Apply the score-entry rules to a batch before it is submitted.
    Entries without both marks and a position are dropped. The remaining
    entries must have marks of at most 100 and distinct positions.
    """
    retained = [entry for entry in entries if entry.marks > 0 and entry.position > 0]
    if not retained:
        raise EmptyScoreBatchError()

    for entry in retained:
        check_marks(entry.marks)

    counts = Counter(entry.position for entry in retained)
    duplicates = [position for position, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicatePositionError(duplicates)

    logger.debug(f"Score batch accepted with {len(retained)} entries")
    return retained

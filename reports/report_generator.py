"""
Report generator for the Kalamela system.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

import pandas as pd

from models.exceptions import ScoreBatchError
from models.rules import KalamelaRules
from models.scoring import Grade, ScoreInput
from rules.fees import calculate_total_fee
from rules.scoring import score, validate_score_batch

logger = logging.getLogger(__name__)

SCORE_SHEET_COLUMNS = [
    'Participant', 'Unit', 'Marks', 'Position', 'Grade',
    'Position Points', 'Grade Points', 'Total Points'
]
LEADERBOARD_COLUMNS = ['Unit', 'Individual Points', 'Group Points', 'Total Points']
FEE_SUMMARY_COLUMNS = [
    'Unit', 'Individual Events', 'Group Events',
    'Individual Total', 'Group Total', 'Total', 'Breakdown'
]


class ReportGenerator:
    """Generates score sheets, leaderboards and fee summaries."""

    def __init__(self, rules: KalamelaRules):
        self.rules = rules

    def build_score_sheet(self, entries: Iterable[ScoreInput], is_group_event: Optional[bool] = None,
                          validate: bool = True) -> pd.DataFrame:
        """
        Score every entry of one event and return the sheet sorted by position.
        Each entry is scored as a group or individual result by its own flag. When
        is_group_event is given, every entry must carry the same flag.
        With validate=True the batch is checked the way the score-entry screen does
        before submission (see rules.scoring.validate_score_batch).
        """
        entries = list(entries)
        if is_group_event is not None:
            mismatched = [entry.participant for entry in entries if entry.is_group_event != is_group_event]
            if mismatched:
                event_type = 'group' if is_group_event else 'individual'
                raise ScoreBatchError(f"Entries not marked as {event_type} event results: {mismatched}")
        if validate:
            entries = validate_score_batch(entries)

        data = []
        for entry in entries:
            result = score(entry)
            data.append({
                'Participant': entry.participant,
                'Unit': entry.unit,
                'Marks': entry.marks,
                'Position': entry.position,
                'Grade': result.grade.value,
                'Position Points': result.position_points,
                'Grade Points': result.grade_points,
                'Total Points': result.total_points,
            })

        df = pd.DataFrame(data, columns=SCORE_SHEET_COLUMNS)
        return df.sort_values('Position', kind='stable').reset_index(drop=True)

    @staticmethod
    def grade_summary(sheet: pd.DataFrame) -> Dict[str, int]:
        """Count A, B and C grades on a score sheet."""
        counts = sheet['Grade'].value_counts()
        summary = {grade.value: int(counts.get(grade.value, 0)) for grade in (Grade.A, Grade.B, Grade.C)}
        summary['Scored'] = len(sheet)
        return summary

    @staticmethod
    def unit_leaderboard(individual_sheet: pd.DataFrame, group_sheet: pd.DataFrame) -> pd.DataFrame:
        """Combine individual and group points per unit, best unit first."""
        individual = individual_sheet.groupby('Unit')['Total Points'].sum().rename('Individual Points')
        group = group_sheet.groupby('Unit')['Total Points'].sum().rename('Group Points')

        board = pd.concat([individual, group], axis=1).fillna(0).astype(int)
        board['Total Points'] = board['Individual Points'] + board['Group Points']
        board = board.rename_axis('Unit').reset_index()
        board = board.sort_values(['Total Points', 'Unit'], ascending=[False, True])
        return board[LEADERBOARD_COLUMNS].reset_index(drop=True)

    @staticmethod
    def top_performers(individual_sheet: pd.DataFrame, limit: int = 10) -> pd.DataFrame:
        """Participants with the highest combined individual points, with grade counts."""
        if individual_sheet.empty:
            return pd.DataFrame(columns=['Participant', 'Unit', 'Total Points', 'A', 'B', 'C'])

        grades = pd.crosstab(
            [individual_sheet['Participant'], individual_sheet['Unit']],
            individual_sheet['Grade']
        ).reindex(columns=[Grade.A.value, Grade.B.value, Grade.C.value], fill_value=0)
        totals = individual_sheet.groupby(['Participant', 'Unit'])['Total Points'].sum()

        performers = grades.join(totals).reset_index()
        performers = performers.sort_values(['Total Points', 'Participant'], ascending=[False, True])
        return performers[['Participant', 'Unit', 'Total Points', 'A', 'B', 'C']].head(limit).reset_index(drop=True)

    def fee_summary(self, unit_counts: Iterable[Mapping]) -> pd.DataFrame:
        """Registration fees per unit from its individual and group entry counts."""
        data: List[Dict] = []
        for row in unit_counts:
            individual_count = int(row['individual_count'])
            group_count = int(row['group_count'])
            fee = calculate_total_fee(individual_count, group_count, self.rules.fees)
            data.append({
                'Unit': row['unit'],
                'Individual Events': individual_count,
                'Group Events': group_count,
                'Individual Total': fee.individual_total,
                'Group Total': fee.group_total,
                'Total': fee.total,
                'Breakdown': fee.breakdown,
            })
        return pd.DataFrame(data, columns=FEE_SUMMARY_COLUMNS)

    def generate_score_sheet(self, entries: Iterable[ScoreInput], output_file: str,
                             is_group_event: Optional[bool] = None) -> int:
        """Write a score sheet CSV. Returns the number of rows written."""
        sheet = self.build_score_sheet(entries, is_group_event)
        sheet.to_csv(output_file, index=False, encoding='utf-8')

        summary = self.grade_summary(sheet)
        logger.info(f"Generated score sheet with {len(sheet)} entries ({summary}): {output_file}")
        return len(sheet)

    def generate_fee_summary(self, unit_counts: Iterable[Mapping], output_file: str) -> int:
        """Write a fee summary CSV. Returns the number of units written."""
        summary = self.fee_summary(unit_counts)
        if summary.empty:
            logger.warning("No unit counts found for fee summary")
            return 0

        summary.to_csv(output_file, index=False, encoding='utf-8')
        logger.info(f"Generated fee summary for {len(summary)} units "
                    f"(total {summary['Total'].sum()}): {output_file}")
        return len(summary)

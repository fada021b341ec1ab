"""
Main application for the Kalamela rules: loads the rules configuration and
writes score sheets and fee summaries.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import pandas as pd

from config.config_manager import ConfigManager
from models.exceptions import KalamelaError
from models.scoring import ScoreInput
from reports.report_generator import ReportGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_score_entries(csv_file: str, is_group_event: bool = False) -> List[ScoreInput]:
    """Read participant, unit, marks and position columns from a scores CSV."""
    df = pd.read_csv(csv_file, encoding='utf-8')
    missing = {'participant', 'unit', 'marks', 'position'} - set(df.columns)
    if missing:
        raise ValueError(f"Scores file '{csv_file}' is missing columns: {sorted(missing)}")

    df['marks'] = pd.to_numeric(df['marks'], errors='coerce').fillna(0)
    df['position'] = pd.to_numeric(df['position'], errors='coerce').fillna(0).astype(int)

    return [
        ScoreInput(
            marks=float(row.marks),
            position=int(row.position),
            is_group_event=is_group_event,
            participant=str(row.participant),
            unit=str(row.unit),
        )
        for row in df.itertuples(index=False)
    ]


def load_unit_counts(csv_file: str) -> List[dict]:
    df = pd.read_csv(csv_file, encoding='utf-8')
    return df[['unit', 'individual_count', 'group_count']].to_dict('records')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Kalamela score sheets and fee summaries")
    parser.add_argument('config_file', nargs='?', default='config.yaml',
                        help="rules configuration (YAML)")
    parser.add_argument('--scores', help="CSV with participant, unit, marks and position columns")
    parser.add_argument('--group', action='store_true', help="score the file as a group event")
    parser.add_argument('--fees', help="CSV with unit, individual_count and group_count columns")
    parser.add_argument('--output-dir', default='reports_out', help="directory for generated reports")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    try:
        logger.info(f"Using configuration file: {args.config_file}")
        config = ConfigManager.load_config(args.config_file)
        rules = ConfigManager.load_rules(config)
        report_generator = ReportGenerator(rules)

        os.makedirs(args.output_dir, exist_ok=True)

        if args.scores:
            entries = load_score_entries(args.scores, args.group)
            output_file = os.path.join(args.output_dir, 'score_sheet.csv')
            report_generator.generate_score_sheet(entries, output_file, args.group)

        if args.fees:
            output_file = os.path.join(args.output_dir, 'fee_summary.csv')
            report_generator.generate_fee_summary(load_unit_counts(args.fees), output_file)

        logger.info("Kalamela reports completed successfully")
        return 0

    except (KalamelaError, ValueError, KeyError, OSError) as e:
        logger.error(f"Error in Kalamela reports: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Tests for report generation and the command-line driver.

This test file focuses on:
- Score sheets for individual and group events
- Unit leaderboards and top performers
- Fee summaries
- End-to-end runs of kalamela_main
"""

import os
import shutil
import tempfile
import unittest

import pandas as pd
import yaml

import kalamela_main
from config.config_manager import ConfigManager
from models.exceptions import DuplicatePositionError, ScoreBatchError
from models.scoring import ScoreInput
from reports.report_generator import ReportGenerator


class TestReportGenerator(unittest.TestCase):
    """Test cases for ReportGenerator."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.generator = ReportGenerator(ConfigManager.load_rules())
        self.individual_entries = [
            ScoreInput(marks=55, position=2, participant='Binu', unit='Aluva'),
            ScoreInput(marks=82, position=1, participant='Anu', unit='Kochi'),
            ScoreInput(marks=45, position=3, participant='Cini', unit='Aluva'),
            ScoreInput(marks=30, position=4, participant='Deepa', unit='Kochi'),
        ]
        self.group_entries = [
            ScoreInput(marks=75, position=1, is_group_event=True, participant='Team A', unit='Aluva'),
            ScoreInput(marks=70, position=2, is_group_event=True, participant='Team B', unit='Thrissur'),
        ]

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_individual_score_sheet(self):
        sheet = self.generator.build_score_sheet(self.individual_entries)
        self.assertEqual(list(sheet['Participant']), ['Anu', 'Binu', 'Cini', 'Deepa'])
        self.assertEqual(list(sheet['Grade']), ['A', 'B', 'C', 'No Grade'])
        self.assertEqual(list(sheet['Position Points']), [5, 3, 1, 0])
        self.assertEqual(list(sheet['Grade Points']), [5, 3, 1, 0])
        self.assertEqual(list(sheet['Total Points']), [10, 6, 2, 0])

    def test_group_score_sheet(self):
        sheet = self.generator.build_score_sheet(self.group_entries, is_group_event=True)
        self.assertEqual(list(sheet['Position Points']), [10, 5])
        self.assertEqual(list(sheet['Grade Points']), [0, 0])
        self.assertEqual(list(sheet['Grade']), ['A', 'A'])

    def test_group_entries_scored_by_their_own_flag(self):
        sheet = self.generator.build_score_sheet(self.group_entries)
        self.assertEqual(list(sheet['Position Points']), [10, 5])
        self.assertEqual(list(sheet['Grade Points']), [0, 0])
        self.assertEqual(list(sheet['Total Points']), [10, 5])

    def test_event_type_mismatch_rejected(self):
        with self.assertRaises(ScoreBatchError):
            self.generator.build_score_sheet(self.group_entries, is_group_event=False)
        with self.assertRaises(ScoreBatchError):
            self.generator.build_score_sheet(self.individual_entries, is_group_event=True)

    def test_score_sheet_validation(self):
        entries = self.individual_entries + [ScoreInput(marks=90, position=1, participant='Esha', unit='Kochi')]
        with self.assertRaises(DuplicatePositionError):
            self.generator.build_score_sheet(entries)

        sheet = self.generator.build_score_sheet(entries, validate=False)
        self.assertEqual(len(sheet), 5)

    def test_grade_summary(self):
        sheet = self.generator.build_score_sheet(self.individual_entries)
        self.assertEqual(ReportGenerator.grade_summary(sheet), {'A': 1, 'B': 1, 'C': 1, 'Scored': 4})

    def test_unit_leaderboard(self):
        individual = self.generator.build_score_sheet(self.individual_entries)
        group = self.generator.build_score_sheet(self.group_entries, is_group_event=True)
        board = ReportGenerator.unit_leaderboard(individual, group)

        self.assertEqual(list(board['Unit']), ['Aluva', 'Kochi', 'Thrissur'])
        self.assertEqual(list(board['Individual Points']), [8, 10, 0])
        self.assertEqual(list(board['Group Points']), [10, 0, 5])
        self.assertEqual(list(board['Total Points']), [18, 10, 5])

    def test_top_performers(self):
        second_event = [
            ScoreInput(marks=65, position=1, participant='Binu', unit='Aluva'),
            ScoreInput(marks=58, position=2, participant='Anu', unit='Kochi'),
        ]
        sheet = pd.concat([
            self.generator.build_score_sheet(self.individual_entries),
            self.generator.build_score_sheet(second_event),
        ], ignore_index=True)

        performers = ReportGenerator.top_performers(sheet, limit=2)
        self.assertEqual(list(performers['Participant']), ['Anu', 'Binu'])
        self.assertEqual(list(performers['Total Points']), [16, 16])
        self.assertEqual(performers.loc[0, 'A'], 1)
        self.assertEqual(performers.loc[0, 'B'], 1)

    def test_top_performers_empty(self):
        empty = self.generator.build_score_sheet([], validate=False)
        self.assertTrue(ReportGenerator.top_performers(empty).empty)

    def test_fee_summary(self):
        summary = self.generator.fee_summary([
            {'unit': 'Aluva', 'individual_count': 3, 'group_count': 2},
            {'unit': 'Kochi', 'individual_count': '1', 'group_count': '0'},
        ])
        self.assertEqual(list(summary['Total']), [350, 50])
        self.assertEqual(summary.loc[0, 'Breakdown'], '3 × ₹50 + 2 × ₹100 = ₹350')

    def test_generate_files(self):
        score_file = os.path.join(self.test_dir, 'scores.csv')
        fee_file = os.path.join(self.test_dir, 'fees.csv')

        self.assertEqual(self.generator.generate_score_sheet(self.individual_entries, score_file), 4)
        self.assertEqual(self.generator.generate_fee_summary(
            [{'unit': 'Aluva', 'individual_count': 2, 'group_count': 1}], fee_file), 1)

        written = pd.read_csv(score_file)
        self.assertEqual(list(written['Total Points']), [10, 6, 2, 0])
        self.assertEqual(pd.read_csv(fee_file).loc[0, 'Total'], 200)

    def test_empty_fee_summary(self):
        fee_file = os.path.join(self.test_dir, 'fees.csv')
        self.assertEqual(self.generator.generate_fee_summary([], fee_file), 0)
        self.assertFalse(os.path.exists(fee_file))


class TestKalamelaMain(unittest.TestCase):
    """End-to-end tests for the command-line driver."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, 'config.yaml')
        self.output_dir = os.path.join(self.test_dir, 'out')
        with open(self.config_path, 'w') as f:
            yaml.dump({'fees': {'individual_event_fee': '40'}}, f)

        self.scores_path = os.path.join(self.test_dir, 'scores.csv')
        pd.DataFrame([
            {'participant': 'Anu', 'unit': 'Kochi', 'marks': 60, 'position': 1},
            {'participant': 'Binu', 'unit': 'Aluva', 'marks': 50, 'position': 2},
            {'participant': 'Cini', 'unit': 'Aluva', 'marks': '', 'position': ''},
        ]).to_csv(self.scores_path, index=False)

        self.fees_path = os.path.join(self.test_dir, 'fee_counts.csv')
        pd.DataFrame([
            {'unit': 'Kochi', 'individual_count': 3, 'group_count': 2},
        ]).to_csv(self.fees_path, index=False)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_writes_reports(self):
        exit_code = kalamela_main.main([
            self.config_path, '--scores', self.scores_path,
            '--fees', self.fees_path, '--output-dir', self.output_dir
        ])
        self.assertEqual(exit_code, 0)

        sheet = pd.read_csv(os.path.join(self.output_dir, 'score_sheet.csv'))
        self.assertEqual(list(sheet['Participant']), ['Anu', 'Binu'])
        self.assertEqual(list(sheet['Grade']), ['A', 'No Grade'])
        self.assertEqual(list(sheet['Total Points']), [10, 3])

        fees = pd.read_csv(os.path.join(self.output_dir, 'fee_summary.csv'))
        self.assertEqual(fees.loc[0, 'Total'], 3 * 40 + 2 * 100)

    def test_group_event_flag(self):
        exit_code = kalamela_main.main([
            self.config_path, '--scores', self.scores_path, '--group', '--output-dir', self.output_dir
        ])
        self.assertEqual(exit_code, 0)
        sheet = pd.read_csv(os.path.join(self.output_dir, 'score_sheet.csv'))
        self.assertEqual(list(sheet['Total Points']), [10, 5])

    def test_bad_configuration_exits_with_error(self):
        with open(self.config_path, 'w') as f:
            yaml.dump({'fees': {'appeal_fee': 'a lot'}}, f)
        exit_code = kalamela_main.main([self.config_path, '--output-dir', self.output_dir])
        self.assertEqual(exit_code, 1)

    def test_missing_columns(self):
        bad_scores = os.path.join(self.test_dir, 'bad.csv')
        pd.DataFrame([{'participant': 'Anu', 'marks': 70}]).to_csv(bad_scores, index=False)
        exit_code = kalamela_main.main([
            self.config_path, '--scores', bad_scores, '--output-dir', self.output_dir
        ])
        self.assertEqual(exit_code, 1)


if __name__ == '__main__':
    unittest.main()

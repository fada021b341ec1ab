"""
Configuration management for the Kalamela rules.
"""

import copy
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

import yaml

from models.exceptions import ConfigurationError
from models.rules import AgeRestrictions, Fees, KalamelaRules, ParticipationLimits

logger = logging.getLogger(__name__)

# rule_category in the rules store -> section name in the config file
RULE_CATEGORY_SECTIONS = {
    'age_restriction': 'age_restrictions',
    'participation_limit': 'participation_limits',
    'fee': 'fees',
}


class ConfigManager:
    """Manages rules configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, merged over the defaults."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return ConfigManager.get_default_config()
        except yaml.YAMLError as e:
            logger.error(f"Error parsing configuration file: {e}. Using default configuration.")
            return ConfigManager.get_default_config()

        if not loaded:
            logger.warning(f"Configuration file '{config_file}' is empty. Using default configuration.")
            return ConfigManager.get_default_config()
        if not isinstance(loaded, Mapping):
            raise ConfigurationError(f"Configuration file '{config_file}' must contain a mapping of rule sections")
        return ConfigManager.merge_with_defaults(loaded)

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'age_restrictions': {
                'senior_dob_start': '1991-01-11',
                'senior_dob_end': '2005-01-10',
                'junior_dob_start': '2005-01-11',
                'junior_dob_end': '2011-06-30',
            },
            'participation_limits': {
                'max_individual_events_per_person': '5',
                'max_participants_per_unit_per_event': '2',
                'max_groups_per_unit_per_group_event': '1',
            },
            'fees': {
                'individual_event_fee': '50',
                'group_event_fee': '100',
                'appeal_fee': '1000',
            },
        }

    @staticmethod
    def merge_with_defaults(config: Mapping[str, Any]) -> Dict[str, Any]:
        """Fill rule keys missing from the given sections with their default values."""
        merged = ConfigManager.get_default_config()
        for section, values in config.items():
            if section in merged:
                if values is None:
                    values = {}
                if not isinstance(values, Mapping):
                    raise ConfigurationError(f"Section '{section}' must be a mapping of rules", section, values)
                for rule_key, rule_value in values.items():
                    if rule_key not in merged[section]:
                        logger.warning(f"Ignoring unknown rule '{rule_key}' in section '{section}'")
                        continue
                    merged[section][rule_key] = rule_value
            else:
                merged[section] = copy.deepcopy(values)
        return merged

    @staticmethod
    def rules_from_records(records: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
        """Convert rule records from the rules store into a configuration mapping.

        Each record carries rule_key, rule_category, rule_value and is_active.
        """
        sections: Dict[str, Dict[str, Any]] = {}
        for record in records:
            if not record.get('is_active', True):
                logger.debug(f"Skipping inactive rule {record.get('rule_key')}")
                continue
            section = RULE_CATEGORY_SECTIONS.get(record.get('rule_category'))
            if section is None:
                logger.warning(f"Unknown rule category '{record.get('rule_category')}' "
                               f"for rule {record.get('rule_key')}")
                continue
            sections.setdefault(section, {})[record['rule_key']] = record.get('rule_value')
        return ConfigManager.merge_with_defaults(sections)

    @staticmethod
    def load_rules(config: Optional[Mapping[str, Any]] = None) -> KalamelaRules:
        """Parse and validate all rule sections once.

        Raises ConfigurationError for malformed values or overlapping age intervals.
        """
        if config is None:
            config = ConfigManager.get_default_config()
        rules = KalamelaRules(
            age_restrictions=AgeRestrictions.from_config(config.get('age_restrictions', {})),
            participation_limits=ParticipationLimits.from_config(config.get('participation_limits', {})),
            fees=Fees.from_config(config.get('fees', {})),
        )
        logger.info(f"Loaded Kalamela rules: {rules}")
        return rules

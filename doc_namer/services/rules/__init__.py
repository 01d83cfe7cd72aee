"""Usage: rule-based filename suggestion helpers."""

from doc_namer.services.rules.date_extractor import extract_date
from doc_namer.services.rules.rule_loader import load_rules, parse_rules
from doc_namer.services.rules.rule_matcher import FilenameMatch, match_rules, suggest_filename

__all__ = ["FilenameMatch", "extract_date", "load_rules", "match_rules", "parse_rules", "suggest_filename"]

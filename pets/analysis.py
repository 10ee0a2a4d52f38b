"""Parsers that pull the imagined child description out of free-form vision output.

The vision model is asked to answer in a three-line format, but nothing
guarantees it does. Parsers return ``None`` when they cannot find a
description so the caller can fall back to a breed-only prompt.
"""
import re
from typing import Optional, Pattern

from utils.logger import get_logger

logger = get_logger("pets.analysis")


class ChildDescriptionParser:
    """Base parser. Subclasses implement ``parse``."""

    def parse(self, analysis: str) -> Optional[str]:
        raise NotImplementedError


class LabelledLineParser(ChildDescriptionParser):
    """Finds the first ``Child...: <description>`` line.

    Matches "Child:", "Child (mix):", "child description:" and so on; the
    label is case-insensitive and the description runs to the end of the line.
    """

    DEFAULT_PATTERN = re.compile(r"Child.*?:(.*?)(?:\n|$)", re.IGNORECASE)

    def __init__(self, pattern: Optional[Pattern] = None):
        self.pattern = pattern or self.DEFAULT_PATTERN

    def parse(self, analysis: str) -> Optional[str]:
        if not analysis:
            return None
        match = self.pattern.search(analysis)
        if not match:
            logger.info("No child description line found in analysis")
            return None
        description = match.group(1).strip()
        if not description:
            logger.info("Child description line is empty")
            return None
        return description


default_parser = LabelledLineParser()

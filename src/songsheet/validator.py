"""
Validation of annotated song text

Only root and bass recognition is checked - chord qualities and extensions
are never judged. Problems found here do not stop rendering; they explain
why an annotation will show up untransposed.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .chords import parse_chord
from .key import KEY_DIRECTIVE_PATTERN
from .pitch import UNKNOWN, resolve_note
from .tokens import ChordToken, split_lines, tokenize


@dataclass
class ValidationIssue:
    """Represents a validation problem"""
    severity: str  # 'error', 'warning', 'info'
    message: str
    location: Optional[str] = None  # e.g., "line 3"


@dataclass
class ValidationResult:
    """Result of validation checks"""
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def by_severity(self, severity: str) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]


UNTERMINATED_PATTERN = re.compile(r'\[[^\]]*$')


class ContentValidator:
    """Checks chord annotations and key directives line by line"""

    @staticmethod
    def validate(content: str) -> ValidationResult:
        """Run all checks"""
        issues = []
        metrics = {'line_count': 0, 'annotation_count': 0, 'chord_count': 0}

        for number, line in enumerate(split_lines(content), 1):
            metrics['line_count'] += 1
            location = f"line {number}"
            issues.extend(ContentValidator._check_annotations(line, location, metrics))
            issues.extend(ContentValidator._check_brackets(line, location))
            issues.extend(ContentValidator._check_key_directive(line, location))

        valid = not any(issue.severity == 'error' for issue in issues)
        return ValidationResult(valid=valid, issues=issues, metrics=metrics)

    @staticmethod
    def _check_annotations(line: str, location: str, metrics: Dict) -> List[ValidationIssue]:
        issues = []
        for token in tokenize(line):
            if not isinstance(token, ChordToken):
                continue
            metrics['annotation_count'] += 1

            symbol = token.symbol
            if symbol is None:
                issues.append(ValidationIssue(
                    'warning', f"'{token.text}' is not a chord and will not be transposed", location))
                continue
            metrics['chord_count'] += 1

            if resolve_note(symbol.root) == UNKNOWN:
                issues.append(ValidationIssue(
                    'warning', f"Root '{symbol.root}' of '{token.text}' is not a known note", location))
            if symbol.is_slash and resolve_note(symbol.bass) == UNKNOWN:
                issues.append(ValidationIssue(
                    'warning', f"Bass '{symbol.bass}' of '{token.text}' is not a known note", location))
        return issues

    @staticmethod
    def _check_brackets(line: str, location: str) -> List[ValidationIssue]:
        issues = []
        if '[]' in line:
            issues.append(ValidationIssue('info', "Empty brackets '[]' are shown as text", location))
        if UNTERMINATED_PATTERN.search(line):
            issues.append(ValidationIssue(
                'error', "Unterminated chord annotation; it runs on to the next ']', "
                "so chords on the following lines may not be transposed", location))
        return issues

    @staticmethod
    def _check_key_directive(line: str, location: str) -> List[ValidationIssue]:
        issues = []
        for match in KEY_DIRECTIVE_PATTERN.finditer(line):
            value = match.group(1).strip()
            if value and resolve_note(value) == UNKNOWN:
                issues.append(ValidationIssue(
                    'info', f"Key '{value}' is not a plain note name; target keys cannot be applied",
                    location))
        return issues


def validate_content(content: str) -> ValidationResult:
    return ContentValidator.validate(content)

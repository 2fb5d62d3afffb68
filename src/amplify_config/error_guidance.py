"""Actionable error guidance for common failure scenarios."""

from dataclasses import dataclass

from rich.markup import escape

from .constants import REQUIRED_LEGACY_KEY
from .errors import AmplifyConfigError


@dataclass
class ErrorGuidance:
    """Structured error guidance with checks and suggestions."""

    title: str
    checks: list[str]  # Things to check
    fixes: list[str]  # How to fix
    examples: list[str] | None = None  # Example commands


class GuidanceProvider:
    """Provides context-aware guidance for errors."""

    @staticmethod
    def get_invalid_config(error: AmplifyConfigError, source: str | None = None) -> ErrorGuidance:
        """Guidance when a legacy config fails the required key check."""
        fixes = []
        if error.recovery_suggestion:
            fixes.append(error.recovery_suggestion)
        fixes.append(f'Add the project region, e.g. "{REQUIRED_LEGACY_KEY}": "us-east-1"')

        checks = [
            f"The config has a top-level '{REQUIRED_LEGACY_KEY}' key",
            "The file was generated by the Amplify CLI (amplify pull / amplify push)",
        ]
        examples = None
        if source:
            checks.append(f"Inspect the keys: python -m json.tool {source}")
            examples = [f"grep {REQUIRED_LEGACY_KEY} {source}"]

        return ErrorGuidance(
            title=f"{error.name}: {error.message}",
            checks=checks,
            fixes=fixes,
            examples=examples,
        )

    @staticmethod
    def get_unreadable_source(path: str, error: Exception) -> ErrorGuidance:
        """Guidance when the legacy config file cannot be read or parsed."""
        if isinstance(error, ValueError):
            checks = [
                "The file contains a single JSON object",
                "aws-exports.js modules must be converted to JSON first",
            ]
            fixes = [
                "Use amplifyconfiguration.json instead of aws-exports.js",
                "Regenerate the file: amplify pull",
            ]
        else:
            checks = [f"File exists: ls -l {path}", f"File is readable: test -r {path}"]
            fixes = [f"Fix permissions: chmod u+r {path}", "Pass the correct path to the command"]

        return ErrorGuidance(
            title=f"Could not read legacy config: {error}",
            checks=checks,
            fixes=fixes,
            examples=[f"python -m json.tool {path}"],
        )

    @staticmethod
    def format_guidance(guidance: ErrorGuidance) -> str:
        """Format guidance as rich-compatible string."""
        lines = [f"[bold yellow]{escape(guidance.title)}[/bold yellow]\n"]

        if guidance.checks:
            lines.append("[cyan]Checks:[/cyan]")
            for check in guidance.checks:
                lines.append(f"  • {escape(check)}")
            lines.append("")

        if guidance.fixes:
            lines.append("[cyan]How to fix:[/cyan]")
            for fix in guidance.fixes:
                lines.append(f"  • {escape(fix)}")
            lines.append("")

        if guidance.examples:
            lines.append("[cyan]Try these commands:[/cyan]")
            for example in guidance.examples:
                lines.append(f"  $ {escape(example)}")

        return "\n".join(lines)

"""Command-line interface for Language Alchemist."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from alchemist.core.config.loader import configure_logging, load_app_config
from alchemist.core.config.models import AppConfig
from alchemist.core.language import Language
from alchemist.core.synthesis import SynthesisConfigError
from alchemist.core.translate import translate_text
from alchemist.core.vocabulary import WordClass
from alchemist.core.workspace import Workspace

console = Console()
logger = logging.getLogger(__name__)


def _resolve_workspace_path(args: argparse.Namespace, config: AppConfig) -> Path:
    """``--workspace`` wins over the configured workspace path."""
    return Path(args.workspace) if args.workspace else Path(config.workspace_path)


def _select_language(workspace: Workspace, name: str | None) -> Language | None:
    """Select ``name`` if given, else keep the current language."""
    if name is None:
        return workspace.current_language
    index = workspace.find(name)
    if index is None:
        return None
    return workspace.select(index)


def _require_language(workspace: Workspace, name: str | None) -> Language | None:
    language = _select_language(workspace, name)
    if language is None:
        target = f"'{name}'" if name else "selected"
        console.print(f"[red]ERROR: No {target} language. Create one with 'alchemist new'.[/red]")
    return language


def cmd_new(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    language = workspace.new_language(args.name)
    workspace.save(path)
    console.print(f"[green]Created language:[/green] {language.name}")
    return 0


def cmd_list(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    if not workspace.languages:
        console.print("No languages yet.")
        return 0
    table = Table("", "Name", "Words", "Rules")
    for index, language in enumerate(workspace.languages):
        marker = "*" if index == workspace.current else ""
        table.add_row(marker, language.name, str(len(language.lexicon)), str(len(language.grammar)))
    console.print(table)
    return 0


def cmd_check(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    language = _require_language(workspace, args.language)
    if language is None:
        return 1
    errors = language.validation_errors()
    if not errors:
        console.print(f"[green]{language.name}: no problems found[/green]")
        return 0
    console.print(f"[bold]{language.name}[/bold]: {len(errors)} problem(s)")
    for error in errors:
        console.print(f"  - {error}")
    return 1


def cmd_sample(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    language = _require_language(workspace, args.language)
    if language is None:
        return 1
    word_class = WordClass.FUNCTION if args.function else WordClass.CONTENT
    count = args.count or config.synthesis.sample_count
    try:
        samples = language.synthesis.generate_samples(
            word_class, count, max_depth=config.synthesis.max_expansion_depth
        )
    except SynthesisConfigError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1
    console.print(f"[bold]{word_class.column_name}[/bold]")
    console.print("  ".join(samples))
    return 0


def cmd_translate(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    language = _require_language(workspace, args.language)
    if language is None:
        return 1
    try:
        translated = translate_text(
            args.text,
            language.lexicon,
            language.synthesis,
            max_depth=config.synthesis.max_expansion_depth,
        )
    except SynthesisConfigError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1
    # New words were minted into the lexicon
    workspace.save(path)
    console.print(translated)
    return 0


def cmd_rules(args: argparse.Namespace, workspace: Workspace, path: Path, config: AppConfig) -> int:
    language = _require_language(workspace, args.language)
    if language is None:
        return 1
    if not len(language.grammar):
        console.print("No grammar rules.")
        return 0
    for number, rule in enumerate(language.grammar.rules, start=1):
        console.print(f"{number}. {rule.describe()}")
    return 0


COMMANDS = {
    "new": cmd_new,
    "list": cmd_list,
    "check": cmd_check,
    "sample": cmd_sample,
    "translate": cmd_translate,
    "rules": cmd_rules,
}


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="alchemist",
        description="Language Alchemist - constructed language workbench",
    )
    p.add_argument("--config", default=None, help="Path to app config (.json/.yaml)")
    p.add_argument("--workspace", default=None, help="Workspace file (overrides config)")
    p.add_argument("--language", default=None, help="Language name to operate on")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    new = sub.add_parser("new", help="Create a language and select it")
    new.add_argument("name", help="Name of the new language")

    sub.add_parser("list", help="List languages in the workspace")
    sub.add_parser("check", help="Report problems with the selected language")

    sample = sub.add_parser("sample", help="Generate sample words")
    sample.add_argument("--function", action="store_true", help="Use function-word lengths")
    sample.add_argument("-n", "--count", type=int, default=None, help="Number of words")

    translate = sub.add_parser("translate", help="Translate text into the selected language")
    translate.add_argument("text", help="Native text to translate")

    sub.add_parser("rules", help="Show grammar rules")

    return p


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, load config and workspace, and dispatch.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_arg_parser().parse_args(argv)

    config = load_app_config(args.config)
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(config)

    path = _resolve_workspace_path(args, config)
    workspace = Workspace.load(path)
    logger.debug("Running %s against %s", args.cmd, path)
    return COMMANDS[args.cmd](args, workspace, path, config)


def main() -> None:
    """Main entry point for CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()

"""The ``blend`` command: portmanteaus from arguments or stdin lines.

Contents:
    * :func:`cli_blend` - Blend one pair from arguments, or one pair per stdin line.

Arguments mode prints the blend or fails with :attr:`ExitCode.NO_PORTMANTEAU`.
Stdin mode (a ``-`` among the arguments) reads records ending at the line
delimiter (``-l``, newline by default). It prints one blend per record that
yields one, reports malformed records on stderr, and keeps going.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import lib_log_rich.runtime
import rich_click as click
from click import get_text_stream

from portmanteau.adapters.config.settings import BlendSettings
from portmanteau.domain.blending import blend, diagnose
from portmanteau.domain.enums import VowelPolicy
from portmanteau.domain.errors import ConfigurationError, NoPortmanteauError, WordPairError
from portmanteau.domain.pairs import LINE_SPLIT_ERROR, WordPair, pair_from_arguments, split_pair, split_records

from ..constants import CLICK_CONTEXT_SETTINGS, STDIN_MARKER
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_SURPLUS_WARNING = "More words than expected on line"


def _require_delimiter(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Reject an empty ``--word-split`` value."""
    if value == "":
        raise click.BadParameter("delimiter must not be empty")
    return value


def _require_single_character(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and len(value) != 1:
        raise click.BadParameter(LINE_SPLIT_ERROR)
    return value


def _resolve_settings(
    cli_ctx: CLIContext,
    word_split: str | None,
    line_split: str | None,
    policy: str | None,
) -> BlendSettings:
    """Combine configured settings with command-line overrides.

    Raises:
        SystemExit: With CONFIG_ERROR when the ``[portmanteau]`` section is invalid.
    """
    try:
        settings = cli_ctx.services.blend_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid blend settings", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    updates: dict[str, object] = {}
    if word_split is not None:
        updates["word_split"] = word_split
    if line_split is not None:
        updates["line_split"] = line_split
    if policy is not None:
        updates["vowel_policy"] = VowelPolicy(policy.lower())
    return settings.model_copy(update=updates) if updates else settings


def _blend_pair(pair: WordPair, policy: VowelPolicy) -> str:
    """Blend *pair* or raise :class:`NoPortmanteauError`."""
    result = blend(pair.left, pair.right, policy=policy)
    if result is None:
        raise NoPortmanteauError(pair.left, pair.right)
    logger.debug("Blended words", extra={"left": pair.left, "right": pair.right, "result": result})
    return result


def _describe_failure(exc: NoPortmanteauError, policy: VowelPolicy, explain: bool) -> str:
    message = str(exc)
    if explain:
        reason = diagnose(exc.left, exc.right, policy=policy)
        if reason is not None:
            message = f"{message}: {reason.description}"
    return message


def _warn_surplus(pair: WordPair) -> None:
    if pair.surplus:
        logger.warning(_SURPLUS_WARNING, extra={"surplus": list(pair.surplus)})
        click.echo(_SURPLUS_WARNING, err=True)


def _blend_arguments(words: tuple[str, ...], settings: BlendSettings, explain: bool) -> None:
    """Blend the pair given as arguments.

    Raises:
        SystemExit: USAGE_ERROR for malformed input, NO_PORTMANTEAU when the
            words do not blend.
    """
    try:
        pair = pair_from_arguments(words, settings.word_split)
    except WordPairError as exc:
        logger.warning("Malformed word arguments", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.USAGE_ERROR) from exc

    _warn_surplus(pair)
    try:
        click.echo(_blend_pair(pair, settings.vowel_policy))
    except NoPortmanteauError as exc:
        logger.info("No portmanteau produced", extra={"left": exc.left, "right": exc.right})
        click.echo(_describe_failure(exc, settings.vowel_policy, explain), err=True)
        raise SystemExit(ExitCode.NO_PORTMANTEAU) from exc


def _blend_line(line: str, settings: BlendSettings, explain: bool) -> bool:
    """Blend one stdin line, reporting problems without aborting.

    Returns:
        True when a portmanteau was printed.
    """
    try:
        pair = split_pair(line, settings.word_split)
    except WordPairError as exc:
        click.echo(str(exc), err=True)
        return False

    _warn_surplus(pair)
    try:
        click.echo(_blend_pair(pair, settings.vowel_policy))
    except NoPortmanteauError as exc:
        if explain:
            click.echo(_describe_failure(exc, settings.vowel_policy, explain), err=True)
        return False
    return True


def _blend_lines(lines: Iterable[str], settings: BlendSettings, explain: bool) -> None:
    """Blend every record of *lines*, split at ``settings.line_split``.

    Raises:
        SystemExit: INPUT_ERROR when reading fails part-way.
    """
    total = produced = 0
    try:
        for record in split_records(lines, settings.line_split):
            total += 1
            produced += _blend_line(record.rstrip("\r\n"), settings, explain)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Reading stdin failed", extra={"error": str(exc), "lines": total})
        click.echo(f"Error: STDIN read ended with error ({exc})", err=True)
        raise SystemExit(ExitCode.INPUT_ERROR) from exc
    logger.info("Finished reading stdin", extra={"lines": total, "produced": produced})


@click.command("blend", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("words", nargs=-1)
@click.option(
    "-w",
    "--word-split",
    "word_split",
    type=str,
    default=None,
    metavar="DELIMITER",
    callback=_require_delimiter,
    help="Characters between the two words (default from config: a space)",
)
@click.option(
    "-l",
    "--line-split",
    "line_split",
    type=str,
    default=None,
    metavar="CHAR",
    callback=_require_single_character,
    help="Character ending each pair read from stdin (default from config: newline)",
)
@click.option(
    "--policy",
    type=click.Choice([p.value for p in VowelPolicy], case_sensitive=False),
    default=None,
    help="Vowel pairing policy (default from config: strict)",
)
@click.option(
    "--explain",
    is_flag=True,
    default=False,
    help="Say why no portmanteau was produced",
)
@click.pass_context
def cli_blend(
    ctx: click.Context,
    words: tuple[str, ...],
    word_split: str | None,
    line_split: str | None,
    policy: str | None,
    explain: bool,
) -> None:
    r"""Blend two words into a portmanteau.

    \b
    portmanteau blend fluffy turtle        -> flurtle
    portmanteau blend -w , liquid,slinky   -> liquinky
    portmanteau blend - < pairs.txt        one pair per line
    portmanteau blend -l . - < pairs.txt   pairs separated by dots

    Words must be at least 5 lowercase ASCII letters.
    """
    cli_ctx = get_cli_context(ctx)
    settings = _resolve_settings(cli_ctx, word_split, line_split, policy)
    stdin_mode = STDIN_MARKER in words

    extra = {
        "command": "blend",
        "mode": "stdin" if stdin_mode else "arguments",
        "word_split": settings.word_split,
        "line_split": settings.line_split,
        "policy": settings.vowel_policy.value,
    }
    with lib_log_rich.runtime.bind(job_id="cli-blend", extra=extra):
        if stdin_mode:
            ignored = [word for word in words if word != STDIN_MARKER]
            if ignored:
                logger.warning("Arguments ignored in stdin mode", extra={"ignored": ignored})
            _blend_lines(get_text_stream("stdin"), settings, explain)
        else:
            _blend_arguments(words, settings, explain)


__all__ = ["cli_blend"]

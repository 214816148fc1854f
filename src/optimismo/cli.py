"""CLI entrypoint for optimismo."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from optimismo.core.config import get_settings
from optimismo.core.logging import setup_logging
from optimismo.lexicon import LexiconError, get_lexicon, load_lexicon
from optimismo.options import Encoding, Locale, OutputMode, ScoreOptions, SortKey
from optimismo.scoring import OptimismScorer

app = typer.Typer(name="optimismo", help="Analyse the optimism of a string", add_completion=False)


def _split_spans(value: str) -> list[int]:
    spans: list[int] = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        try:
            spans.append(int(raw))
        except ValueError as exc:
            raise typer.BadParameter(f"not an integer span length: {raw!r}") from exc
    return spans


def _scorer(lexicon_path: Path | None) -> OptimismScorer:
    try:
        lexicon = load_lexicon(lexicon_path) if lexicon_path is not None else get_lexicon()
    except LexiconError as exc:
        typer.echo(f"Lexicon error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    return OptimismScorer(lexicon)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Logging level (overrides OPTIMISMO_LOG_LEVEL)"),
) -> None:
    setup_logging(level=log_level)


@app.command()
def info(
    lexicon: Path | None = typer.Option(None, "--lexicon", help="Lexicon JSON (overrides OPTIMISMO_LEXICON_PATH)"),
) -> None:
    settings = get_settings()
    scorer = _scorer(lexicon)
    if lexicon is not None:
        source = str(lexicon)
    elif settings.uses_bundled_lexicon:
        source = "bundled"
    else:
        source = str(settings.lexicon_path)
    active_level = logging.getLevelName(logging.getLogger().getEffectiveLevel())
    typer.echo("=" * 50)
    typer.echo("optimismo - Active Configuration")
    typer.echo("=" * 50)
    typer.echo(f"Lexicon: {source}")
    typer.echo(f"Future terms: {len(scorer.lexicon.future)}")
    typer.echo(f"Affect terms: {len(scorer.lexicon.affect)}")
    typer.echo(f"Longest term (words): {scorer.lexicon.max_span}")
    typer.echo(f"Log level: {active_level}")
    typer.echo(f"Log format: {settings.log_format}")


@app.command("score")
def score_cmd(
    text: str = typer.Argument(..., help="Text to score, or '-' to read stdin"),
    encoding: Encoding = typer.Option(Encoding.BINARY, help="binary|frequency|percent"),
    locale: Locale = typer.Option(Locale.US, help="US|GB spelling of the input"),
    min_weight: float | None = typer.Option(None, "--min", help="Lowest lexicon weight to include"),
    max_weight: float | None = typer.Option(None, "--max", help="Highest lexicon weight to include"),
    ngrams: str = typer.Option("2,3", "--ngrams", help="Comma-separated n-gram lengths, 0 disables"),
    no_int: bool = typer.Option(False, "--no-int", help="Do not add the intercept"),
    output: OutputMode = typer.Option(OutputMode.LEX, help="lex|matches|full"),
    places: int | None = typer.Option(None, min=0, max=20, help="Decimal places to round to"),
    sort_by: SortKey = typer.Option(SortKey.FREQ, "--sort-by", help="freq|weight|lex"),
    wc_grams: bool = typer.Option(False, "--wc-grams", help="Count n-grams in the word count"),
    lexicon: Path | None = typer.Option(None, "--lexicon", help="Lexicon JSON (overrides OPTIMISMO_LEXICON_PATH)"),
) -> None:
    """Score a string and print the result."""
    if text == "-":
        text = sys.stdin.read()

    options = ScoreOptions(
        encoding=encoding,
        locale=locale,
        min_weight=min_weight,
        max_weight=max_weight,
        n_grams=_split_spans(ngrams),
        no_int=no_int,
        output=output,
        places=places,
        sort_by=sort_by,
        wc_grams=wc_grams,
    )
    result = _scorer(lexicon).score(text, options)
    if result is None:
        typer.echo("No result: nothing to score", err=True)
        raise typer.Exit(code=1)
    if isinstance(result, float):
        typer.echo(result)
        return
    typer.echo(json.dumps(result.model_dump(), indent=2))


if __name__ == "__main__":
    app()

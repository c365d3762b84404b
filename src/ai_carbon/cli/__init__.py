"""ai-carbon CLI -- typer-based command interface.

Commands:
    ai-carbon providers                     List supported providers
    ai-carbon models <provider>             List a provider's models
    ai-carbon calculate -p P -m M -i N -o N Impact of one call
    ai-carbon compare -i N -o N             Reference model per provider
    ai-carbon rank -i N -o N                Providers ranked by CO2
"""

from __future__ import annotations

import os

import typer

from ai_carbon.calculator import (
    calculate_impact,
    compare_providers,
    get_supported_models,
    get_supported_providers,
    rank_by_efficiency,
)
from ai_carbon.cli._errors import carbon_errors
from ai_carbon.formatting import format_emission_result
from ai_carbon.types import EmissionConfig

app = typer.Typer(
    name="ai-carbon",
    help="Estimate CO2, energy and water for AI model inference calls.",
    no_args_is_help=True,
)


@app.callback()
def _setup() -> None:
    from ai_carbon.observability import ObservabilityConfig, configure

    cfg = ObservabilityConfig()
    # Keep command output clean unless a level was asked for.
    if "AI_CARBON_LOG_LEVEL" not in os.environ:
        cfg.log_level = "WARNING"
    configure(cfg)


@app.command()
def providers() -> None:
    """List supported providers."""
    for p in get_supported_providers():
        typer.echo(p)


@app.command()
@carbon_errors
def models(
    provider: str = typer.Argument(..., help="Provider id (claude, openai, gemini)"),
) -> None:
    """List a provider's models."""
    for m in get_supported_models(provider):
        typer.echo(m)


@app.command()
@carbon_errors
def calculate(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider id"),
    model: str = typer.Option(..., "--model", "-m", help="Model id"),
    input_tokens: int = typer.Option(..., "--input", "-i", help="Input tokens"),
    output_tokens: int = typer.Option(..., "--output", "-o", help="Output tokens"),
    cache_write: int = typer.Option(None, "--cache-write", help="Cache creation tokens"),
    cache_read: int = typer.Option(None, "--cache-read", help="Cache read tokens"),
    reasoning: bool = typer.Option(False, "--reasoning", help="Reasoning mode"),
    region: str = typer.Option(None, "--region", help="Datacenter region"),
) -> None:
    """Estimate the impact of a single call."""
    result = calculate_impact(
        EmissionConfig(
            provider=provider,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cache_creation_tokens=cache_write,
            cache_read_tokens=cache_read,
            reasoning=reasoning,
            region=region,
        )
    )
    typer.echo(format_emission_result(result))


@app.command()
@carbon_errors
def compare(
    input_tokens: int = typer.Option(1000, "--input", "-i", help="Input tokens"),
    output_tokens: int = typer.Option(500, "--output", "-o", help="Output tokens"),
    reasoning: bool = typer.Option(False, "--reasoning", help="Reasoning mode"),
) -> None:
    """Compare each provider's reference model at the same token counts."""
    for result in compare_providers(input_tokens, output_tokens, reasoning).values():
        typer.echo(format_emission_result(result))
        typer.echo("")


@app.command()
@carbon_errors
def rank(
    input_tokens: int = typer.Option(1000, "--input", "-i", help="Input tokens"),
    output_tokens: int = typer.Option(500, "--output", "-o", help="Output tokens"),
    reasoning: bool = typer.Option(False, "--reasoning", help="Reasoning mode"),
) -> None:
    """Rank providers from lowest to highest CO2."""
    for i, entry in enumerate(rank_by_efficiency(input_tokens, output_tokens, reasoning), 1):
        typer.echo(
            f"{i}. {entry.provider.upper()} {entry.model}: "
            f"{entry.co2_grams:.6f}g CO2 ({entry.efficiency:.2f}x efficiency)"
        )


def main() -> None:
    """Entry point for the ai-carbon CLI."""
    app()

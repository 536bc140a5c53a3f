from __future__ import annotations

from typing import Any, Dict, List, Optional

import typer

from ownvsrent.adapters.config import config
from ownvsrent.adapters.storage import read_df, write_df
from ownvsrent.adapters.url_codec import build_share_url
from ownvsrent.analysis.finance_batch import compare_scenarios_df, monthly_costs_df, sensitivity_df
from ownvsrent.analysis.frames import monthly_frame, yearly_frame
from ownvsrent.domain.parameters import canonical_field
from ownvsrent.domain.presets import DEFAULT_PARAMETERS, get_preset, preset_options
from ownvsrent.services.calculations import run_calculation
from ownvsrent.services.formatting import format_currency, format_percentage
from ownvsrent.services.scenario import calculate_scenario, summarize

app = typer.Typer(help="Compare buying a home with renting and investing the difference.")


def _base_parameters(preset: Optional[str]) -> Dict[str, Any]:
    if preset is None:
        return dict(DEFAULT_PARAMETERS)
    template = get_preset(preset)
    if template is None:
        typer.echo(f"Unknown preset: {preset}", err=True)
        raise typer.Exit(code=2)
    return template["parameters"]


def _parse_overrides(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        name = canonical_field(key.strip())
        if not sep or name is None:
            raise typer.BadParameter(f"expected FIELD=VALUE with a known field, got '{pair}'")
        out[name] = value.strip()
    return out


@app.command()
def compare(
    preset: Optional[str] = typer.Option(None, help="Preset id to start from (see `presets`)."),
    home_price: Optional[float] = typer.Option(None, help="Purchase price."),
    down_payment: Optional[float] = typer.Option(None, help="Down payment, percent of price."),
    mortgage_rate: Optional[float] = typer.Option(None, help="Mortgage rate, annual percent."),
    loan_term: Optional[float] = typer.Option(None, help="Loan term in years."),
    property_tax_rate: Optional[float] = typer.Option(None, help="Property tax, annual percent of price."),
    home_insurance: Optional[float] = typer.Option(None, help="Home insurance per year."),
    maintenance_cost: Optional[float] = typer.Option(None, help="Maintenance per year."),
    hoa_fees: Optional[float] = typer.Option(None, help="HOA per month."),
    home_appreciation_rate: Optional[float] = typer.Option(None, help="Home appreciation, annual percent."),
    rental_income: Optional[float] = typer.Option(None, help="Rental income from the owned home, per month."),
    monthly_rent: Optional[float] = typer.Option(None, help="Rent per month."),
    rent_increase_rate: Optional[float] = typer.Option(None, help="Rent increase, annual percent."),
    investment_start_balance: Optional[float] = typer.Option(None, help="Savings available today."),
    monthly_budget: Optional[float] = typer.Option(None, help="Monthly housing + investing budget."),
    investment_return: Optional[float] = typer.Option(None, help="Investment return, annual percent."),
    time_horizon: Optional[float] = typer.Option(None, help="Projection horizon in years."),
    strict: bool = typer.Option(True, help="Refuse to print results for invalid parameters."),
    yearly: bool = typer.Option(False, help="Print a year-by-year table."),
    csv: Optional[str] = typer.Option(None, help="Write month-by-month trajectories to this path."),
) -> None:
    """
    Project owning vs renting and print the outcome.
    """
    params = _base_parameters(preset)
    overrides = {
        "home_price": home_price,
        "down_payment": down_payment,
        "mortgage_rate": mortgage_rate,
        "loan_term": loan_term,
        "property_tax_rate": property_tax_rate,
        "home_insurance": home_insurance,
        "maintenance_cost": maintenance_cost,
        "hoa_fees": hoa_fees,
        "home_appreciation_rate": home_appreciation_rate,
        "rental_income": rental_income,
        "monthly_rent": monthly_rent,
        "rent_increase_rate": rent_increase_rate,
        "investment_start_balance": investment_start_balance,
        "monthly_budget": monthly_budget,
        "investment_return": investment_return,
        "time_horizon": time_horizon,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})

    if strict:
        outcome = run_calculation(params)
        if outcome.result is None or outcome.summary is None:
            typer.echo(outcome.error, err=True)
            raise typer.Exit(code=1)
        result, summary = outcome.result, outcome.summary
    else:
        result = calculate_scenario(params)
        summary = summarize(result, params)

    typer.echo(f"Horizon: {summary.time_horizon:g} years")
    typer.echo(f"Monthly mortgage payment: {format_currency(result.monthly_mortgage_payment)}")
    typer.echo(f"Monthly cost of owning: {format_currency(result.effective_monthly_housing_cost)}")
    typer.echo(f"Down payment: {format_currency(result.down_payment_amount)}")
    typer.echo("")
    typer.echo(f"Own + invest net worth: {format_currency(summary.own_final_net_worth)}")
    typer.echo(f"Rent + invest net worth: {format_currency(summary.rent_final_net_worth)}")
    typer.echo(
        f"Difference: {format_currency(summary.net_worth_difference)} "
        f"({format_percentage(summary.net_worth_difference_percent)})"
    )
    typer.echo(f"Total cost of owning: {format_currency(summary.own_total_costs, compact=True)}")
    typer.echo(f"Total rent paid: {format_currency(summary.rent_total_costs, compact=True)}")
    if summary.break_even_point is not None:
        typer.echo(f"Break-even: {summary.break_even_point:.1f} years")
    else:
        typer.echo("Break-even: not within horizon")
    typer.echo(f"Recommendation: {summary.recommendation}")

    if yearly:
        typer.echo("")
        typer.echo(yearly_frame(result).to_string(index=False, float_format=lambda v: f"{v:,.0f}"))

    if csv:
        path = write_df(monthly_frame(result), csv)
        typer.echo(f"Wrote {result.months + 1} months to {path}")


@app.command()
def presets() -> None:
    """
    List the built-in preset templates.
    """
    for option in preset_options():
        typer.echo(f"{option['id']}: {option['name']} - {option['description']}")


@app.command("share-url")
def share_url(
    preset: Optional[str] = typer.Option(None, help="Preset id to start from."),
    set_: List[str] = typer.Option([], "--set", help="Override a parameter, FIELD=VALUE (repeatable)."),
    base_url: Optional[str] = typer.Option(None, help="Link base (default: OWNVSRENT_SHARE_BASE_URL)."),
) -> None:
    """
    Print a compact shareable link for a parameter set.
    """
    params = _base_parameters(preset)
    params.update(_parse_overrides(set_))
    typer.echo(build_share_url(params, base_url or config.SHARE_BASE_URL, defaults=DEFAULT_PARAMETERS))


@app.command()
def batch(
    input_path: str = typer.Argument(..., help="CSV/parquet/JSON of parameter sets, one per row."),
    output_path: str = typer.Argument(..., help="Where to write the per-row comparison."),
    costs_only: bool = typer.Option(False, help="Only compute monthly ownership costs, no projection."),
) -> None:
    """
    Run one projection per input row and write the summary table.
    """
    if costs_only:
        path = write_df(monthly_costs_df(read_df(input_path)), output_path)
        typer.echo(f"Wrote monthly costs -> {path}")
        return

    df = compare_scenarios_df(read_df(input_path))
    path = write_df(df, output_path)
    invalid = int((df["validation_errors"] != "").sum())
    typer.echo(f"Compared {len(df)} scenarios ({invalid} with validation errors) -> {path}")


@app.command()
def sensitivity(
    field: str = typer.Argument(..., help="Parameter to vary, e.g. mortgage_rate."),
    values: List[float] = typer.Argument(..., help="Values to try."),
    preset: Optional[str] = typer.Option(None, help="Preset id to hold the other parameters at."),
) -> None:
    """
    Vary one parameter and show how the outcome moves.
    """
    if canonical_field(field) is None:
        raise typer.BadParameter(f"unknown parameter: {field}")
    df = sensitivity_df(_base_parameters(preset), field, values)
    typer.echo(df.to_string(index=False))


if __name__ == "__main__":
    app()

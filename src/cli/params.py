import typer

OUTPUT_FORMATS = ("json", "yaml", "text")
DEFAULT_OUTPUT = "json"


def output_params(
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: json (default), yaml or text.",
    ),
    out_json: bool = typer.Option(False, "--json", help="Alias for --output json"),
    out_yaml: bool = typer.Option(False, "--yaml", help="Alias for --output yaml"),
    out_text: bool = typer.Option(False, "--text", help="Alias for --output text"),
) -> str:
    # só conta --output se o usuário informou
    chosen = [out_json, out_yaml, out_text, output is not None]
    if sum(chosen) > 1:
        raise typer.BadParameter(
            "Use only one output option: --json, --yaml, --text or --output."
        )

    for flag, fmt in zip((out_json, out_yaml, out_text), OUTPUT_FORMATS):
        if flag:
            return fmt

    if output is None:
        return DEFAULT_OUTPUT

    output = output.lower()
    if output not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown output format {output!r}; choose one of {', '.join(OUTPUT_FORMATS)}."
        )
    return output

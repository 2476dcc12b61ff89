"""Command line entry point of the Elasticsearch aggregation check."""
from __future__ import annotations

from typing import List, Optional

import typer

from check_es_aggregation.check_types.primitives import AggregationKind
from check_es_aggregation.config import build_check_config, load_environment
from check_es_aggregation.errors import ConfigError
from check_es_aggregation.tools.flows import run_check
from check_es_aggregation.utils import configure_logging

EPILOG = """
Supported aggregations: min, max, avg, sum, pct (N-th percentile, see
--percentile), pctr (percentile rank of --percentile), stdev (standard
deviation), stdevmin / stdevmax (extended stats min / max), var (variance).

Filters take <field>:<value> or <field>=<value>, e.g.
-t hostname:localhost, -m domain:*example.net, --range code:"400 TO 599",
--not-range exit_code:"<=1", --not-prefix message:kernel.
Exists filters take a bare field name.

Prefer filters over the query string: filters are not scored and are
cached. To match an exact string with a term filter you may need the
not-analyzed variant of the field (e.g. <field>.keyword).
"""

app = typer.Typer(
    add_completion=False,
    help="Monitoring plugin computing an Elasticsearch aggregation over a recent time window.",
)


@app.command(epilog=EPILOG)
def check(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Document field to aggregate (required)"),
    warning: Optional[str] = typer.Option(None, "--warning", "-w", help="Warning threshold range (required)"),
    critical: Optional[str] = typer.Option(None, "--critical", "-c", help="Critical threshold range (required)"),
    es_url: Optional[str] = typer.Option(None, "--es-url", help="Elasticsearch URL [env ELASTIC_URL, default http://localhost:9200]"),
    index_pattern: str = typer.Option("logstash-*", "--index-pattern", help="Elasticsearch index pattern"),
    query: str = typer.Option("*", "--query", "-q", help="Elasticsearch query string"),
    exists: Optional[List[str]] = typer.Option(None, "--exists", "-e", help="Field must exist"),
    not_exists: Optional[List[str]] = typer.Option(None, "--not-exists", help="Field must be missing"),
    term: Optional[List[str]] = typer.Option(None, "--term", "-t", help="Positive term filter"),
    not_term: Optional[List[str]] = typer.Option(None, "--not-term", help="Negative term filter"),
    match: Optional[List[str]] = typer.Option(None, "--match", "-m", help="Positive match filter"),
    not_match: Optional[List[str]] = typer.Option(None, "--not-match", help="Negative match filter"),
    prefix: Optional[List[str]] = typer.Option(None, "--prefix", "-p", help="Positive prefix filter"),
    not_prefix: Optional[List[str]] = typer.Option(None, "--not-prefix", help="Negative prefix filter"),
    regex: Optional[List[str]] = typer.Option(None, "--regex", "-r", help="Positive regex filter"),
    not_regex: Optional[List[str]] = typer.Option(None, "--not-regex", help="Negative regex filter"),
    range_: Optional[str] = typer.Option(None, "--range", help="Positive value range filter"),
    not_range: Optional[str] = typer.Option(None, "--not-range", help="Negative value range filter"),
    aggregation: AggregationKind = typer.Option(AggregationKind.MAX, "--aggregation", "-a", help="Aggregation to compute"),
    percentile: float = typer.Option(99.0, "--percentile", help="Percent for pct, value for pctr"),
    unit: str = typer.Option("", "--unit", "-u", help="Unit displayed in the check output"),
    desc: Optional[str] = typer.Option(None, "--desc", "-d", help="Check description [default: the key]"),
    duration: str = typer.Option("5m", "--duration", help="Time range to search, e.g. 90s, 5m, 1h"),
    timestamp_field: str = typer.Option("@timestamp", "--timestamp-field", help="Date field of the time range"),
    null_code: int = typer.Option(2, "--null-code", "-n", help="Exit code when no data is found (0-3)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds [env ELASTIC_TIMEOUT (ms), default 30s]"),
    verbose: bool = typer.Option(False, "--verbose", help="Log check details to stderr"),
    debug: bool = typer.Option(False, "--debug", help="Also log HTTP requests to stderr"),
):
    """Check an aggregated field value against warning and critical ranges."""
    try:
        config = build_check_config(
            key,
            warning,
            critical,
            es_url=es_url,
            index_pattern=index_pattern,
            query=query,
            exists=exists or (),
            not_exists=not_exists or (),
            term=term or (),
            not_term=not_term or (),
            match=match or (),
            not_match=not_match or (),
            prefix=prefix or (),
            not_prefix=not_prefix or (),
            regex=regex or (),
            not_regex=not_regex or (),
            range_=range_,
            not_range=not_range,
            aggregation=aggregation.value,
            percentile=percentile,
            unit=unit,
            desc=desc,
            duration=duration,
            timestamp_field=timestamp_field,
            null_code=null_code,
            timeout=timeout,
            verbose=verbose,
            debug=debug,
        )
    except ConfigError as e:
        for message in e.messages:
            typer.echo(message)
        raise typer.Exit(code=1)

    configure_logging(verbose=config.verbose, debug=config.debug)
    outcome = run_check(config)
    typer.echo(str(outcome))
    raise typer.Exit(code=outcome.exit_code)


def main() -> None:
    load_environment()
    app(prog_name="check-es-aggregation")


if __name__ == "__main__":
    main()

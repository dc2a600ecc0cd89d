from typing import Optional
import typer
from pydantic import ValidationError
from .config import load_config, AppConfig
from .logging import IndentedLog, setup_logging
from .runners.runner import TestRunner
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="FTR Testkit - nested console transcripts for suite/hook/test runs")

@app.callback()
def main():
    """Run suites and report them as nested transcripts."""

def _config(path: Optional[str]) -> AppConfig:
    if not path:
        return AppConfig()
    try:
        return load_config(path)
    except (OSError, ValidationError) as e:
        typer.echo(f"Invalid config {path}: {e}", err=True)
        raise typer.Exit(code=2)

@app.command()
def run(
    suite: str = typer.Argument(..., help="Suite to run: a name under ftr_testkit.testsuites or a dotted module path"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    list_tests: bool = typer.Option(False, "--list", help="List tests without running"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write a JUnit XML report with this report name"),
    junit_dir: Optional[str] = typer.Option(None, "--junit-dir", help="Root directory for the JUnit report"),
    no_color: bool = typer.Option(False, "--no-color", help="Strip ANSI colors from the transcript"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Level for diagnostic logging"),
):
    log = setup_logging(log_level)
    cfg = _config(config)
    if junit:
        cfg.junit.enabled = True
        cfg.junit.report_name = junit
    if junit_dir:
        cfg.junit.root_directory = junit_dir
    if no_color:
        cfg.reporter.color = False

    runner = TestRunner(cfg)
    if list_tests:
        for t in runner.discover(suite):
            typer.echo(t.full_title())
        raise typer.Exit(code=0)

    root = runner.load(suite)
    ConsoleReporter(runner.emitter, IndentedLog(color=cfg.reporter.color), cfg)
    try:
        stats = runner.run(root)
    except Exception:
        # exit code 1 is reserved for failing tests
        log.exception("run of %s aborted", suite)
        raise typer.Exit(code=3)
    raise typer.Exit(code=0 if stats.failures == 0 else 1)

if __name__ == "__main__":
    app()

"""CLI entry point and main pipeline."""

import logging
from pathlib import Path

import click
import yaml

from .config import DEFAULT_CONFIG_FILENAME, Config
from .extraction.parser import MarkdownTaskParser
from .extraction.scanner import DiscoveryError, MarkdownFileScanner
from .report.aggregator import aggregate_tasks
from .report.renderer import ReportWriteError, render_report, summary_line, write_report
from .storage.models import Task

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class TaskAggregatorPipeline:
    """Main pipeline: discover, parse, sort, render, write."""

    def __init__(self, config: Config):
        self.config = config
        self.scanner = MarkdownFileScanner(config.root_path, config.output_filename)
        self.parser = MarkdownTaskParser()

    def collect(self) -> list[Task]:
        """Scan every markdown file and return all tasks ordered by day."""
        logger.info(f"Scanning {self.config.root_path} for markdown files...")
        files = self.scanner.scan()
        logger.info(f"Found {len(files)} markdown files")

        tasks = aggregate_tasks(self.parser.parse_file(file) for file in files)
        logger.info(f"Extracted {len(tasks)} tasks")
        return tasks

    def run(self) -> list[Task]:
        """Run the full pipeline.

        Raises:
            DiscoveryError: if the tree cannot be listed; nothing is written
            ReportWriteError: if the report file cannot be written
        """
        tasks = self.collect()
        content = render_report(tasks, link_to_source=self.config.link_to_source)

        write_report(content, self.config.output_path)
        click.echo(summary_line(tasks, self.config.output_filename))
        return tasks


def load_config(config_path: str | None) -> Config:
    """Load the given config file, or .tasks.yaml if present, else defaults."""
    if config_path is None:
        if not Path(DEFAULT_CONFIG_FILENAME).is_file():
            return Config()
        config_path = DEFAULT_CONFIG_FILENAME

    try:
        return Config.from_yaml(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e


@click.command()
@click.option("--output", "-o", default=None, help="Output filename (default: TASKS.md)")
@click.option("--config", "-c", default=None, help="Config file path")
@click.option(
    "--links/--no-links",
    default=None,
    help="Render tasks as links back to their source file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(output: str | None, config: str | None, links: bool | None, verbose: bool) -> None:
    """Collect markdown checkbox tasks below the current directory into one report."""
    cfg = load_config(config)
    if output:
        cfg.output_filename = output
    if links is not None:
        cfg.link_to_source = links

    logging.getLogger().setLevel(logging.DEBUG if verbose else cfg.log_level)

    pipeline = TaskAggregatorPipeline(cfg)
    try:
        pipeline.run()
    except DiscoveryError as e:
        logger.error(f"Task scan aborted: {e}")
        raise click.ClickException(str(e)) from e
    except ReportWriteError as e:
        # Not fatal: the run still ends normally
        logger.error(str(e))


if __name__ == "__main__":
    cli()

import logging
from pathlib import Path
from typing import List, Optional

import typer

from pyatomword.core.exceptions import ConfigurationError, DataSourceError, InvalidWeightError
from pyatomword.data.constants import DecompositionConstants
from pyatomword.parsing.api import export_results, load_table, run_from_config, spell_words

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s -> %(message)s"

app = typer.Typer(help="Spell words with periodic-table element symbols.", add_completion=False)


@app.command()
def spell(
    words: Optional[List[str]] = typer.Argument(None, help="Words to decompose (default: the demo word list)"),
    data_file: Optional[Path] = typer.Option(None, "--data-file", "-d",
                                             help="Comma-delimited element data file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML run configuration"),
    lowercase: bool = typer.Option(False, "--lowercase", help="Lowercase words before decomposing"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write a .csv/.xlsx report"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    """
    Decompose each word into element symbols and print one sentence per word.
    """
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)
    if config is not None and (words or data_file is not None or lowercase):
        raise typer.BadParameter("words, --data-file and --lowercase cannot be combined with --config; "
                                 "set words, data_file and lowercase in the configuration file",
                                 param_hint="--config")
    try:
        if config is not None:
            frame = run_from_config(config)
        else:
            table = load_table(data_file)
            words = list(words) if words else list(DecompositionConstants.DEFAULT_WORDS)
            if lowercase:
                words = [word.lower() for word in words]
            logger.debug("Decomposing %d words from the command line", len(words))
            frame = spell_words(words, table)
    except DataSourceError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except (InvalidWeightError, ConfigurationError) as e:
        typer.echo(f"Fatal: {e}", err=True)
        raise typer.Exit(code=1)
    for sentence in frame['sentence']:
        typer.echo(sentence)
    if output is not None:
        export_results(frame, output)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

from rscss.cli.main import cli

__all__ = ["cli"]

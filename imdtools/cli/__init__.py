from .cli import cli

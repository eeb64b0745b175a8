"""
Point d'entrée CLI de VidOrg.

Monte la commande organize sur l'application Typer.
"""

import typer

from .adapters.cli.commands import organize

app = typer.Typer(
    name="organize",
    help="Range des vidéos par année/mois de tournage",
    add_completion=False,
)

app.command()(organize)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()

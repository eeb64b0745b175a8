"""
Package CLI de VidOrg (Typer + Rich).

- commands : commande organize
- confirmation : question oui/non avant la copie
- display : affichages Rich (resume, ignores, bilan)
"""

"""
Question de confirmation avant la copie.

Seul un "y" exact (casse et espaces ignores) vaut accord. Tout le reste,
reponse vide et "yes" compris, est un refus. Pas de delai : le run attend
la reponse indefiniment.
"""

from typing import Optional

from rich.console import Console

CONFIRMATION_PROMPT = "Do you wish to copy these files? (Y/N): "


def is_affirmative(answer: Optional[str]) -> bool:
    """Interprete la reponse de l'operateur."""
    if answer is None:
        return False
    return answer.strip().lower() == "y"


def ask_confirmation(console: Console, prompt: str = CONFIRMATION_PROMPT) -> bool:
    """
    Pose la question et bloque jusqu'a la reponse.

    Une fin de flux (stdin ferme) est traitee comme un refus.
    """
    try:
        answer = console.input(prompt, markup=False)
    except EOFError:
        return False
    return is_affirmative(answer)

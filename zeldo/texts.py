"""Dialogue and label texts, and the helper fairy's animation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from zeldo.constants import SpriteId
from zeldo.model import GameState, IntRect, Vector

NAVI_FRAME_MS = 90
NAVI_STEP = 17
NAVI_WRAP = 50
NAVI_FIRST = 11

DIALOGUE_FONT_SIZE = 20
HELP_FONT_SIZE = 25


def _dialogue(*lines: str) -> str:
    """Join dialogue lines, each one ending with a newline."""
    return "".join(f"{line}\n" for line in lines)


HELP_TEXT = _dialogue(
    "Hey Lonk ! Tu sembles un peu perdu, "
    "je vais te donner quelques conseils !",
    "Pour selectionner ton personnage, "
    "choisi le avec la fleche puis ",
    "clique sur 'ENTRER'",
    "Si tu veux te deplacer, utilise 'Z','Q','S','D' "
    "et utilise 'I' pour l'inventaire",
    "Si tu veux acceder au menu option depuis le jeu, "
    "appuis sur 'ECHAP'",
    "Pour attaquer utilise ton 'CLIC GAUCHE'",
)

QUEST_START_TEXT = _dialogue(
    "Hey jeune aventurier, pourrais-tu aider "
    "un vieil homme comme moi ?",
    "Mon frere est parti en courant vers l'EST "
    "et je l'ai entendu",
    "crier 'a l'aide'. J'ai aussi entendu dire "
    "qu'il y avait des",
    "monstres vers l'EST. Pourrais-tu y aller pour moi ?",
)

QUEST_BROTHER_TEXT = _dialogue(
    "Bonjour, jeune homme... Quoi ? C'est mon frere "
    "qui t'envoie ! Il devait",
    "etre inquiet, mais je vais bien. Je me baladais "
    "dans ces ruines et j'ai ",
    "apercu ce pendentif. Pourrais-tu le remettre a  "
    "mon frere pour lui dire ",
    "que tout va bien ?",
)

QUEST_END_TEXT = _dialogue(
    "Oh, jeune aventurier, c'est vous ! Oh, vous avez "
    "retrouve mon frere",
    "et il vous a laisse un pendentif pour moi ? "
    "Maintenant que je sais",
    "que mon frere est sain et sauf, je vais pouvoir "
    "retourner au village",
    "Cocorico et vivre ma petite vie de vieil homme.",
)


@dataclass(frozen=True)
class TextSpec:
    """A piece of on-screen text: its string, size, position and colour."""

    string: str
    size: int
    pos: tuple[float, float]
    color: tuple[int, int, int] = (255, 255, 255)


def text_specs() -> tuple[TextSpec, ...]:
    """All game texts, indexed as the rest of the game refers to them."""
    return (
        TextSpec(HELP_TEXT, HELP_FONT_SIZE, (515.0, 60.0)),
        TextSpec(QUEST_START_TEXT, DIALOGUE_FONT_SIZE, (650.0, 560.0)),
        TextSpec(QUEST_BROTHER_TEXT, DIALOGUE_FONT_SIZE, (470.0, 20.0)),
        TextSpec(QUEST_END_TEXT, DIALOGUE_FONT_SIZE, (650.0, 560.0)),
        TextSpec("Sword", DIALOGUE_FONT_SIZE, (740.0, 320.0)),
        TextSpec("Shield", DIALOGUE_FONT_SIZE, (805.0, 320.0)),
        TextSpec("Pendentif", DIALOGUE_FONT_SIZE, (865.0, 320.0)),
    )


def navi_frame_step(rect: IntRect) -> IntRect:
    """The fairy's next animation frame after the given one."""
    top = rect.top + NAVI_STEP
    if top >= NAVI_WRAP:
        top = NAVI_FIRST
    return replace(rect, top=top)


def place_quest_box_top(state: GameState) -> None:
    """Move the quest dialogue box to the top of the screen."""
    state.sprites[SpriteId.QUEST_BOX].pos = Vector(450.0, 0.0)
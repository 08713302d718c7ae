import pytest

SHAMAN_DECKSTRING = (
    "AAECAdL6AwbkuAPczAOczgP1zgPi7AOXoAQM27gDmLkD4cwD/tED8NQDqN4Dqt4D4OwDre4DjZ8E+Z8E/p8EAA=="
)

SHAMAN_HERO = 64850

SHAMAN_SINGLES = [56420, 58972, 59164, 59253, 63074, 69655]

SHAMAN_DOUBLES = [
    56411,
    56472,
    58977,
    59646,
    60016,
    61224,
    61226,
    63072,
    63277,
    69517,
    69625,
    69630,
]


@pytest.fixture
def shaman_deckstring() -> str:
    """Standard shaman deck string."""
    return SHAMAN_DECKSTRING


@pytest.fixture
def shaman_cards() -> dict[int, int]:
    """Card counts encoded in the shaman deck string."""
    cards = {card_id: 1 for card_id in SHAMAN_SINGLES}
    cards.update({card_id: 2 for card_id in SHAMAN_DOUBLES})
    return cards


@pytest.fixture
def sample_page_text() -> str:
    """Page text export as copied from the game client (Italian locale)."""
    return (
        "### Mazzo Sciamano2\n"
        "# Classe: Sciamano\n"
        "# Formato: Standard\n"
        "# Anno del Grifone\n"
        "# \n"
        "# 2x (0) Fioritura Fulminea\n"
        "# 2x (1) Dardo Fulminante\n"
        "# 2x (1) Elementale Fiammeggiante\n"
        "# 1x (1) Iniziato Intrepido\n"
        "# 2x (2) Arma Roccia Dura\n"
        "# 2x (2) Bacchettaia\n"
        "# 2x (2) Custode dell'Arena\n"
        "# 2x (2) Studente Diligente\n"
        "# 1x (2) Thalnos\n"
        "# 2x (3) Apparizione della Palude\n"
        "# 2x (3) Assalto della Tempesta\n"
        "# 1x (3) Dama Vashj\n"
        "# 2x (3) Fulminatore Arido\n"
        "# 1x (3) Istruttrice Cuorfiammante\n"
        "# 1x (3) Oratrice Gidra\n"
        "# 2x (3) Portale: Sacrespire\n"
        "# 1x (4) Bru'kan\n"
        "# 2x (5) Martelfato\n"
        "# \n"
        f"{SHAMAN_DECKSTRING}\n"
        "# \n"
        "# Per utilizzare questo mazzo, copialo negli appunti e crea un nuovo mazzo in Hearthstone"
    )

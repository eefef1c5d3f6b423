import pytest

from deckkit.config import DeckLimits, get_settings
from deckkit.models.card import (
    AVAIL_OCG,
    AVAIL_TCG,
    TYPE_FUSION,
    TYPE_MONSTER,
    TYPE_SPELL,
    TYPE_SYNCHRO,
    TYPE_TOKEN,
    TYPE_XYZ,
    CardData,
)
from deckkit.services.card_database import InMemoryCardDatabase
from deckkit.services.lflist_registry import LFListRegistry
from tests.card_codes import (
    ASH_BLOSSOM,
    BLUE_EYES,
    BLUE_EYES_ALT_ART,
    MAXX_C,
    NUMBER_39,
    OCG_EXCLUSIVE,
    POLYMER_FIEND,
    RAIGEKI,
    SHEEP_TOKEN,
    STARDUST,
    TCG_EXCLUSIVE,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def limits() -> DeckLimits:
    """Small limits so size edge cases stay readable."""
    return DeckLimits(deck_min=0, deck_max=10, extra_max=3, side_max=3, pack_max=100)


@pytest.fixture
def card_db() -> InMemoryCardDatabase:
    return InMemoryCardDatabase(
        [
            CardData(code=BLUE_EYES, type=TYPE_MONSTER),
            CardData(code=BLUE_EYES_ALT_ART, alias=BLUE_EYES, type=TYPE_MONSTER),
            CardData(code=ASH_BLOSSOM, type=TYPE_MONSTER),
            CardData(code=MAXX_C, type=TYPE_MONSTER),
            CardData(code=RAIGEKI, type=TYPE_SPELL),
            CardData(code=STARDUST, type=TYPE_MONSTER | TYPE_SYNCHRO),
            CardData(code=POLYMER_FIEND, type=TYPE_MONSTER | TYPE_FUSION),
            CardData(code=NUMBER_39, type=TYPE_MONSTER | TYPE_XYZ),
            CardData(code=SHEEP_TOKEN, type=TYPE_MONSTER | TYPE_TOKEN),
            CardData(code=OCG_EXCLUSIVE, type=TYPE_MONSTER, ot=AVAIL_OCG),
            CardData(code=TCG_EXCLUSIVE, type=TYPE_MONSTER, ot=AVAIL_TCG),
        ]
    )


@pytest.fixture
def sample_lflist_text() -> str:
    """Two banlists in one file, with comments and a stray line."""
    return f"""#[2024.01 TCG][2024.01 OCG]
stray line before any list
!2024.01 TCG
#forbidden
{RAIGEKI} 0
#limited
{ASH_BLOSSOM} 1
#semi-limited
{MAXX_C} 2
!2024.01 OCG
{MAXX_C} 0
"""


@pytest.fixture
def registry(sample_lflist_text: str) -> LFListRegistry:
    registry = LFListRegistry()
    registry.load_text(sample_lflist_text)
    registry.add_no_limit()
    return registry

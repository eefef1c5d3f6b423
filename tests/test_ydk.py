from pathlib import Path

from deckkit.config import DeckLimits
from deckkit.models.deck import Deck, DeckArray
from deckkit.parsers.ydk import YDK_HEADER, format_deck_array, format_ydk, parse_ydk
from tests.card_codes import ASH_BLOSSOM, BLUE_EYES, MAXX_C, RAIGEKI, STARDUST

FIXTURES = Path(__file__).parent / "fixtures"


class TestParseYdk:
    def test_parse_fixture_file(self, limits: DeckLimits) -> None:
        text = (FIXTURES / "sample.ydk").read_text(encoding="utf-8")

        dbuf, mainc, sidec = parse_ydk(text, limits)

        assert dbuf == [BLUE_EYES, BLUE_EYES, ASH_BLOSSOM, RAIGEKI, STARDUST, MAXX_C]
        assert (mainc, sidec) == (5, 1)

    def test_ignores_non_digit_lines(self, limits: DeckLimits) -> None:
        text = "#main\n\n  123\nabc\n89631139\r\n"
        assert parse_ydk(text, limits) == ([BLUE_EYES], 1, 0)

    def test_skips_out_of_range_identifiers(self, limits: DeckLimits) -> None:
        text = "4294967296\n4294967295\n"
        assert parse_ydk(text, limits) == ([4294967295], 1, 0)

    def test_everything_after_side_marker_is_side(self, limits: DeckLimits) -> None:
        text = "!side\n1\n#extra\n2\n"
        assert parse_ydk(text, limits) == ([1, 2], 0, 2)

    def test_stops_at_pack_limit(self) -> None:
        limits = DeckLimits(deck_min=0, pack_max=3)
        text = "\n".join(str(code) for code in range(1, 10))

        dbuf, mainc, sidec = parse_ydk(text, limits)

        assert dbuf == [1, 2, 3]
        assert (mainc, sidec) == (3, 0)

    def test_empty_text(self, limits: DeckLimits) -> None:
        assert parse_ydk("", limits) == ([], 0, 0)


class TestFormatYdk:
    def test_format_deck(self) -> None:
        deck = Deck(main=[BLUE_EYES, RAIGEKI], extra=[STARDUST], side=[MAXX_C])

        text = format_ydk(deck)

        assert text == (
            f"{YDK_HEADER}\n#main\n{BLUE_EYES}\n{RAIGEKI}\n#extra\n{STARDUST}\n!side\n{MAXX_C}\n"
        )

    def test_format_empty_deck(self) -> None:
        assert format_ydk(Deck()) == f"{YDK_HEADER}\n#main\n#extra\n!side\n"

    def test_format_deck_array_matches_deck(self) -> None:
        array = DeckArray(main=[BLUE_EYES], extra=[STARDUST], side=[MAXX_C])
        deck = Deck(main=[BLUE_EYES], extra=[STARDUST], side=[MAXX_C])

        assert format_deck_array(array) == format_ydk(deck)

    def test_formatted_text_parses_back(self, limits: DeckLimits) -> None:
        deck = Deck(main=[BLUE_EYES, RAIGEKI], extra=[STARDUST], side=[MAXX_C, ASH_BLOSSOM])

        dbuf, mainc, sidec = parse_ydk(format_ydk(deck), limits)

        assert dbuf == [BLUE_EYES, RAIGEKI, STARDUST, MAXX_C, ASH_BLOSSOM]
        assert (mainc, sidec) == (3, 2)

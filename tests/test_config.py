import pytest

from deckkit.config import DeckLimits, DeckSettings, get_settings


class TestDeckSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("MAX_DECK", "MIN_DECK", "MAX_EXTRA", "MAX_SIDE", "PACK_MAX_SIZE"):
            monkeypatch.delenv(f"YGOPRO_{name}", raising=False)

        settings = DeckSettings(_env_file=None)

        assert settings.max_deck == 4096
        assert settings.min_deck == 10
        assert settings.max_extra == 4096
        assert settings.max_side == 4096
        assert settings.pack_max_size == 1000

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YGOPRO_MAX_DECK", "60")
        monkeypatch.setenv("YGOPRO_MIN_DECK", "40")
        monkeypatch.setenv("YGOPRO_MAX_EXTRA", "15")
        monkeypatch.setenv("YGOPRO_MAX_SIDE", "15")

        settings = DeckSettings(_env_file=None)

        assert (settings.min_deck, settings.max_deck) == (40, 60)
        assert (settings.max_extra, settings.max_side) == (15, 15)

    def test_negative_values_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YGOPRO_MAX_SIDE", "-5")
        settings = DeckSettings(_env_file=None)
        assert settings.max_side == 0

    def test_min_clamped_to_max(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YGOPRO_MAX_DECK", "40")
        monkeypatch.setenv("YGOPRO_MIN_DECK", "60")
        settings = DeckSettings(_env_file=None)
        assert settings.min_deck == 40

    def test_unparsable_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YGOPRO_MAX_DECK", "sixty")
        monkeypatch.setenv("YGOPRO_MAX_SIDE", "")
        monkeypatch.setenv("YGOPRO_MIN_DECK", " 40 ")

        settings = DeckSettings(_env_file=None)

        assert settings.max_deck == 4096
        assert settings.max_side == 4096
        assert settings.min_deck == 40

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestDeckLimits:
    def test_derived_buffer_maximums(self) -> None:
        limits = DeckLimits(deck_min=40, deck_max=60, extra_max=15, side_max=15)
        assert limits.mainc_max == 180
        assert limits.sidec_max == 180

    def test_clamping(self) -> None:
        limits = DeckLimits(deck_min=70, deck_max=60, extra_max=-1, side_max=0)

        assert limits.deck_min == 60
        assert limits.extra_max == 0
        assert limits.side_max == 0

    def test_immutable(self) -> None:
        limits = DeckLimits()
        with pytest.raises(AttributeError):
            limits.deck_max = 1  # type: ignore[misc]

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YGOPRO_MAX_DECK", "60")
        monkeypatch.setenv("YGOPRO_MIN_DECK", "40")
        monkeypatch.setenv("YGOPRO_PACK_MAX_SIZE", "200")

        limits = DeckLimits.default()

        assert (limits.deck_min, limits.deck_max, limits.pack_max) == (40, 60, 200)

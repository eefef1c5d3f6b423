"""Tests for the check_deck command-line job."""

from pathlib import Path

import pytest

from deckkit.config import DeckLimits
from deckkit.jobs.check_deck import build_parser, build_registry, main, run_check
from deckkit.models.errors import DeckError
from tests.card_codes import RAIGEKI

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def legal_deck(tmp_path: Path) -> Path:
    path = tmp_path / "legal.ydk"
    path.write_text("#main\n89631139\n14558127\n#extra\n44508094\n!side\n23434538\n")
    return path


class TestBuildRegistry:
    def test_files_then_no_limit(self) -> None:
        registry = build_registry([FIXTURES / "lflist.conf"])

        assert [lflist.name for lflist in registry] == ["2024.01 TCG", "N/A"]


class TestRunCheck:
    def test_forbidden_card_reported(self, limits: DeckLimits) -> None:
        args = build_parser().parse_args(
            [
                str(FIXTURES / "sample.ydk"),
                "--lflist",
                str(FIXTURES / "lflist.conf"),
                "--cards",
                str(FIXTURES / "cards.json"),
            ]
        )

        status = run_check(args, limits)

        assert status.error is DeckError.LFLIST
        assert status.code == RAIGEKI

    def test_no_limit_list_by_name(self, limits: DeckLimits) -> None:
        args = build_parser().parse_args(
            [
                str(FIXTURES / "sample.ydk"),
                "--lflist",
                str(FIXTURES / "lflist.conf"),
                "--cards",
                str(FIXTURES / "cards.json"),
                "--list",
                "N/A",
            ]
        )

        assert run_check(args, limits).ok

    def test_unknown_list_name_rejected(self, limits: DeckLimits, tmp_path: Path) -> None:
        lflist = tmp_path / "strict.conf"
        lflist.write_text("!Strict\n89631139 0\n")
        deck = tmp_path / "one.ydk"
        deck.write_text("#main\n89631139\n")
        args = build_parser().parse_args(
            [str(deck), "--lflist", str(lflist), "--list", "Typo"]
        )

        with pytest.raises(SystemExit, match="Unknown banlist: Typo"):
            run_check(args, limits)

    def test_without_card_database(self, limits: DeckLimits, legal_deck: Path) -> None:
        args = build_parser().parse_args(
            [str(legal_deck), "--lflist", str(FIXTURES / "lflist.conf")]
        )

        assert run_check(args, limits).ok


class TestMain:
    def test_exit_codes(
        self,
        legal_deck: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("YGOPRO_MIN_DECK", "0")
        lflist = str(FIXTURES / "lflist.conf")
        cards = str(FIXTURES / "cards.json")

        assert main([str(legal_deck), "--lflist", lflist, "--cards", cards]) == 0
        assert capsys.readouterr().out.strip() == "OK"

        assert main([str(FIXTURES / "sample.ydk"), "--lflist", lflist, "--cards", cards]) == 1
        assert capsys.readouterr().out.strip() == f"LFLIST {RAIGEKI}"

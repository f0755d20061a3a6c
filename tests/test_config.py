"""Tests for ContextVar-based scan configuration."""

from threading import Thread

import pytest

from bytelex import (
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
    tokenize,
)
from bytelex.tokens import TokenKind


@pytest.fixture(autouse=True)
def _default_config():
    reset_scan_config()
    yield
    reset_scan_config()


class TestScanConfigDataclass:
    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.skip_whitespace is False
        assert config.source_file is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.skip_whitespace = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"skip_whitespace": True, "unknown_key": 1})
        assert config == ScanConfig(skip_whitespace=True)


class TestContextManagement:
    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(skip_whitespace=True))
        assert get_scan_config().skip_whitespace is True
        reset_scan_config()
        assert get_scan_config() == ScanConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(source_file="x.txt")):
                raise RuntimeError("boom")
        assert get_scan_config().source_file is None

    def test_thread_isolation(self) -> None:
        seen: list[ScanConfig] = []

        def worker() -> None:
            set_scan_config(ScanConfig(skip_whitespace=True))
            seen.append(get_scan_config())

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [ScanConfig(skip_whitespace=True)]
        assert get_scan_config() == ScanConfig()


class TestConfigEffects:
    def test_skip_whitespace(self) -> None:
        with scan_config_context(ScanConfig(skip_whitespace=True)):
            tokens = tokenize(b"1 + 2\n")
        assert [t.kind for t in tokens] == [
            TokenKind.INT,
            TokenKind.PONCT,
            TokenKind.INT,
            TokenKind.NULL,
        ]
        # Skipped whitespace still advances the cursor
        assert tokens[-1].loc == (2, 7)

    def test_skip_whitespace_does_not_affect_next_token(self) -> None:
        with scan_config_context(ScanConfig(skip_whitespace=True)):
            scanner = Scanner(b" a")
            assert scanner.next_token().kind is TokenKind.WHITESPACE

    def test_default_source_file(self) -> None:
        with scan_config_context(ScanConfig(source_file="cfg.txt")):
            token = Scanner(b"a").next_token()
        assert str(token.location) == "cfg.txt:1:2"

    def test_explicit_source_file_wins(self) -> None:
        with scan_config_context(ScanConfig(source_file="cfg.txt")):
            token = Scanner(b"a", source_file="own.txt").next_token()
        assert token.location.source_file == "own.txt"

"""Integration tests for repeatable render passes."""

from stockgrid.engine import StockGridEngine
from stockgrid.layout.canvas import CanvasSize

CANVAS = CanvasSize(338, 158)


class TestRenderIdempotency:
    """Identical inputs must give identical render trees."""

    def test_same_engine_twice(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        """Test two passes over a deterministic fetcher build equal trees."""
        fetcher = stub_fetcher_factory(missing={"MSFT"}, delays={"TSLA": 0.02})
        config = make_config(symbols=["TSLA", "AAPL", "MSFT", "NVDA", "AMZN"], grid={"debug_mode": True})
        engine = StockGridEngine(config, fetcher=fetcher, sleep=recording_sleep)

        first = engine.run(CANVAS)
        second = engine.run(CANVAS)

        assert first == second

    def test_separate_engines(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        config = make_config(symbols=["TSLA", "AAPL"])

        first = StockGridEngine(config, fetcher=stub_fetcher_factory(), sleep=recording_sleep).run(CANVAS)
        second = StockGridEngine(config, fetcher=stub_fetcher_factory(), sleep=recording_sleep).run(CANVAS)

        assert first == second

    def test_error_log_is_scoped_to_one_pass(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        """Test failures do not accumulate across passes."""
        engine = StockGridEngine(
            make_config(symbols=["TSLA", "AAPL"]),
            fetcher=stub_fetcher_factory(missing={"AAPL"}),
            sleep=recording_sleep
        )

        first = engine.render_pass(CANVAS)
        second = engine.render_pass(CANVAS)

        assert len(first.error_log) == 1
        assert len(second.error_log) == 1
        assert first.error_log is not second.error_log

    def test_error_panel_is_repeatable(self, make_config, stub_fetcher_factory) -> None:
        engine = StockGridEngine(make_config(symbols=list("ABCDEFG")), fetcher=stub_fetcher_factory())

        assert engine.run(CANVAS) == engine.run(CANVAS)

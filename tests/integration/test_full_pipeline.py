"""Integration tests for the full fetch -> layout -> render pipeline."""

import pytest
from PIL import Image

from stockgrid.engine import StockGridEngine
from stockgrid.layout.canvas import CanvasSize, MediumWidgetCanvasProvider
from stockgrid.layout.planner import LayoutPlan
from stockgrid.render.tree import BlankCell, ErrorCell, Grid, ImageCell

CANVAS = CanvasSize(338, 158)


class TestFullPipeline:
    """End-to-end render passes with a network-free fetcher."""

    def test_all_charts_load(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        fetcher = stub_fetcher_factory()
        engine = StockGridEngine(make_config(), fetcher=fetcher, sleep=recording_sleep)

        render_pass = engine.render_pass(CANVAS)

        grid = render_pass.panel.body
        assert isinstance(grid, Grid)
        assert render_pass.plan == LayoutPlan(rows=2, cols=3)
        assert (grid.cell_width, grid.cell_height) == (110, 76)
        assert [c.symbol for c in grid.image_cells] == list(engine.config.stock_symbols)
        assert len(render_pass.error_log) == 0
        assert render_pass.panel.footer is None
        assert render_pass.panel.background == "#1a1a1a"
        assert fetcher.total_calls == 6
        assert recording_sleep.delays == []

    def test_five_symbols_scenario(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        """Test 5 symbols give a 2x3 grid with one trailing blank cell."""
        symbols = ["A", "B", "C", "D", "E"]
        engine = StockGridEngine(make_config(symbols=symbols), fetcher=stub_fetcher_factory(), sleep=recording_sleep)

        grid = engine.run(CANVAS).body

        cells = list(grid.iter_cells())
        assert (grid.rows, grid.cols) == (2, 3)
        assert len(cells) == 6
        assert [c.symbol for c in cells[:5]] == symbols
        assert isinstance(cells[5], BlankCell)

    def test_all_fetches_fail(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        """Test every failure becomes a placeholder and an error log entry."""
        symbols = ["TSLA", "AAPL", "GOOGL", "MSFT"]
        fetcher = stub_fetcher_factory(missing=set(symbols))
        engine = StockGridEngine(make_config(symbols=symbols), fetcher=fetcher, sleep=recording_sleep)

        render_pass = engine.render_pass(CANVAS)

        grid = render_pass.panel.body
        assert not render_pass.panel.is_error
        assert len(grid.image_cells) == 0
        assert len(grid.error_cells) == len(symbols)
        assert len(render_pass.error_log) == len(symbols)
        assert sorted(render_pass.error_log.symbols) == sorted(symbols)
        assert fetcher.total_calls == len(symbols) * 3

    def test_mixed_results_keep_positions(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        symbols = ["TSLA", "AAPL", "GOOGL"]
        fetcher = stub_fetcher_factory(missing={"AAPL"}, delays={"TSLA": 0.05})
        engine = StockGridEngine(make_config(symbols=symbols), fetcher=fetcher, sleep=recording_sleep)

        cells = list(engine.run(CANVAS).body.iter_cells())

        assert [type(c) for c in cells] == [ImageCell, ErrorCell, ImageCell]
        assert [c.symbol for c in cells] == symbols

    @pytest.mark.parametrize("debug_mode,missing,expect_footer", [
        (True, {"AAPL"}, True),
        (True, set(), False),
        (False, {"AAPL"}, False),
    ])
    def test_debug_footer(
        self, make_config, stub_fetcher_factory, recording_sleep, debug_mode, missing, expect_footer
    ) -> None:
        """Test the footer appears only in debug mode and only with errors."""
        config = make_config(symbols=["TSLA", "AAPL"], grid={"debug_mode": debug_mode})
        engine = StockGridEngine(config, fetcher=stub_fetcher_factory(missing=missing), sleep=recording_sleep)

        panel = engine.run(CANVAS)

        assert (panel.footer is not None) == expect_footer
        if expect_footer:
            assert "1 chart failed" in panel.footer.text
            # Grid keeps the geometry it has without a footer
            assert panel.body.cell_height == 154

    def test_concurrency_cap_from_config(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        symbols = ["A", "B", "C", "D", "E", "F"]
        fetcher = stub_fetcher_factory(delays={s: 0.02 for s in symbols})
        config = make_config(symbols=symbols, fetch={"max_concurrent": 2})
        engine = StockGridEngine(config, fetcher=fetcher, sleep=recording_sleep)

        engine.run(CANVAS)

        assert fetcher.peak_in_flight <= 2

    def test_retry_settings_from_config(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        config = make_config(symbols=["TSLA"], fetch={"max_retries": 1, "base_delay_ms": 200})
        fetcher = stub_fetcher_factory(missing={"TSLA"})
        engine = StockGridEngine(config, fetcher=fetcher, sleep=recording_sleep)

        engine.run(CANVAS)

        assert fetcher.calls == {"TSLA": 2}
        assert recording_sleep.delays == [0.2]

    def test_canvas_provider(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        engine = StockGridEngine(make_config(symbols=["TSLA"]), fetcher=stub_fetcher_factory(), sleep=recording_sleep)

        panel = engine.run_with_provider(MediumWidgetCanvasProvider(428))

        assert (panel.width, panel.height) == (364, 170)
        assert (panel.body.cell_width, panel.body.cell_height) == (360, 166)

    def test_render_image(self, make_config, stub_fetcher_factory, recording_sleep) -> None:
        engine = StockGridEngine(
            make_config(symbols=["TSLA", "AAPL"]),
            fetcher=stub_fetcher_factory(missing={"AAPL"}),
            sleep=recording_sleep
        )

        image = engine.render_image(CANVAS)

        assert isinstance(image, Image.Image)
        assert image.size == (338, 158)

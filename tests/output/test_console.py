"""Tests for Rich Console factory and theme."""

from io import StringIO

from skillmgr.output.console import SKILLMGR_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_styles_registered(self) -> None:
        for name in ("skm.ok", "skm.error", "skm.id", "skm.label", "skm.level", "skm.secret"):
            assert name in SKILLMGR_THEME.styles

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        console.print("[skm.ok]OK[/skm.ok]")
        assert "OK" in get_output(console)

"""Tests for devcon.lib.commands — CommandRegistry."""
import logging

from devcon.lib.commands import CommandRegistry


def _noop(console, argv):
    pass


class TestCommandRegistry:
    def test_find_missing(self):
        assert CommandRegistry().find("nope") is None

    def test_register_and_find(self):
        reg = CommandRegistry()
        reg.register("god", _noop)
        cmd = reg.find("god")
        assert cmd.name == "god"
        assert cmd.handler is _noop

    def test_first_registration_wins(self, caplog):
        def first(console, argv):
            pass

        def second(console, argv):
            pass

        reg = CommandRegistry()
        reg.register("dup", first)
        with caplog.at_level(logging.WARNING, logger="devcon.lib.commands"):
            reg.register("dup", second)
        assert reg.find("dup").handler is first
        assert len(reg) == 2
        assert "already registered" in caplog.text

    def test_names_in_registration_order(self):
        reg = CommandRegistry()
        for name in ("b", "a", "c"):
            reg.register(name, _noop)
        assert reg.names() == ["b", "a", "c"]

    def test_case_sensitive(self):
        reg = CommandRegistry()
        reg.register("Quit", _noop)
        assert reg.find("quit") is None

"""
Smoke tests for the terminal player entry point.
"""
from bridgefast import cli_player


class TestCliPlayer:
    def test_list_modules(self, capsys):
        assert cli_player.main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "professional-boundaries" in out
        assert "handling-harsh-criticism" in out
        assert "ethical-negotiations" in out

    def test_unknown_module_exits_nonzero(self, capsys, db_path):
        assert cli_player.main(["no-such-module", "--db", str(db_path), "--mute"]) == 1
        assert "no-such-module" in capsys.readouterr().out

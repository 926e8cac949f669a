from datetime import date

import pytest

from dietassist.app import DietManagerApp, main, parse_keywords


def feeder(*lines):
    it = iter(lines)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def run_app(tmp_path, *lines):
    app = DietManagerApp(tmp_path, input_func=feeder(*lines))
    app.run()
    return app


def test_parse_keywords_trims_and_drops_blanks():
    assert parse_keywords(" a , b,,\tc ") == ["a", "b", "c"]


def test_parse_keywords_lowercase():
    assert parse_keywords("Red, FRUIT", lowercase=True) == ["red", "fruit"]
    assert parse_keywords("Red, FRUIT") == ["Red", "FRUIT"]


def test_parse_keywords_empty():
    assert parse_keywords("  ,  ") == []


def test_add_basic_food_and_exit_saves(tmp_path):
    run_app(tmp_path, "1", "3", "apple", "fruit, red", "52", "5", "7")
    assert (tmp_path / "foods.txt").read_text() == "BASIC;apple;fruit,red;52\n"


def test_undo_removes_added_food(tmp_path, capsys):
    app = run_app(tmp_path, "1", "3", "apple", "fruit", "52", "5", "5", "7")
    assert (tmp_path / "foods.txt").read_text() == ""
    assert "apple" not in app.database
    assert "Last action undone." in capsys.readouterr().out


def test_nothing_to_undo(tmp_path, capsys):
    run_app(tmp_path, "5", "7")
    out = capsys.readouterr().out
    assert "Nothing to undo." in out
    assert "Goodbye" in out


def test_duplicate_identifier_rejected(tmp_path, capsys):
    (tmp_path / "foods.txt").write_text("BASIC;apple;fruit;52\n")
    app = run_app(tmp_path, "1", "3", "apple", "5", "7")
    assert "already exists" in capsys.readouterr().out
    assert len(app.database) == 1


def test_log_food_on_selected_date(tmp_path):
    (tmp_path / "foods.txt").write_text("BASIC;apple;fruit;52\n")
    app = run_app(
        tmp_path, "4", "1", "2024-03-01", "2", "1", "1", "1", "2", "3", "7"
    )
    lines = (tmp_path / "dailylog.txt").read_text().splitlines()
    assert "2024-03-01;apple:2" in lines
    assert app.log.current_date == "2024-03-01"


def test_invalid_date_format_keeps_date(tmp_path, capsys):
    app = run_app(tmp_path, "4", "1", "2024/03/01", "7")
    assert "Invalid date format" in capsys.readouterr().out
    assert app.log.current_date == date.today().isoformat()


def test_remove_food_from_log(tmp_path):
    today = date.today().isoformat()
    (tmp_path / "foods.txt").write_text("BASIC;apple;fruit;52\n")
    (tmp_path / "dailylog.txt").write_text(f"{today};apple:1\n")
    app = run_app(tmp_path, "2", "2", "1", "3", "7")
    assert len(app.log.current_day_log()) == 0
    assert f"{today};" in (tmp_path / "dailylog.txt").read_text().splitlines()


def test_remove_then_undo_restores_entry(tmp_path):
    today = date.today().isoformat()
    (tmp_path / "foods.txt").write_text("BASIC;apple;fruit;52\n")
    (tmp_path / "dailylog.txt").write_text(f"{today};apple:1\n")
    app = run_app(tmp_path, "2", "2", "1", "3", "5", "7")
    assert f"{today};apple:1" in (tmp_path / "dailylog.txt").read_text().splitlines()
    assert not app.undo_manager.can_undo()


def test_edit_basic_info_saved(tmp_path):
    run_app(tmp_path, "3", "2", "2", "160", "25", "6", "7")
    first = (tmp_path / "profile.txt").read_text().splitlines()[0]
    assert first == "Female;160;25;Harris-Benedict Equation"


def test_change_calculator(tmp_path):
    run_app(tmp_path, "3", "5", "2", "6", "7")
    first = (tmp_path / "profile.txt").read_text().splitlines()[0]
    assert first.endswith(";Mifflin-St Jeor Equation")


def test_change_calculator_undone(tmp_path):
    app = run_app(tmp_path, "3", "5", "2", "6", "5", "7")
    assert app.profile.calculator.name == "Harris-Benedict Equation"


def test_invalid_activity_level(tmp_path, capsys):
    app = run_app(tmp_path, "3", "4", "9", "6", "7")
    assert "Invalid choice." in capsys.readouterr().out
    assert app.undo_manager.history() == []


def test_create_composite_food(tmp_path):
    (tmp_path / "foods.txt").write_text("BASIC;apple;fruit;52\nBASIC;banana;fruit;89\n")
    app = run_app(tmp_path, "1", "4", "snack", "mix", "1", "2", "2", "1", "0", "5", "7")
    lines = (tmp_path / "foods.txt").read_text().splitlines()
    assert "COMPOSITE;snack;mix;apple:2,banana:1" in lines
    assert "snack" in app.database


def test_composite_without_components_rejected(tmp_path, capsys):
    app = run_app(tmp_path, "1", "4", "empty", "k", "0", "5", "7")
    assert "at least one component" in capsys.readouterr().out
    assert "empty" not in app.database


def test_search_match_all(tmp_path, capsys):
    (tmp_path / "foods.txt").write_text(
        "BASIC;apple;fruit,red;52\nBASIC;tomato;vegetable,red;18\n"
    )
    run_app(tmp_path, "1", "2", "red, fruit", "1", "5", "7")
    out = capsys.readouterr().out
    results = out.split("===== Search Results =====")[1]
    assert "apple" in results
    assert "tomato" not in results


def test_search_match_any(tmp_path, capsys):
    (tmp_path / "foods.txt").write_text(
        "BASIC;apple;fruit,red;52\nBASIC;tomato;vegetable,red;18\n"
    )
    run_app(tmp_path, "1", "2", "fruit, vegetable", "2", "5", "7")
    results = capsys.readouterr().out.split("===== Search Results =====")[1]
    assert "apple" in results and "tomato" in results


def test_end_of_input_stops_without_saving(tmp_path, capsys):
    app = run_app(tmp_path)
    assert app.running is False
    assert "Welcome to" in capsys.readouterr().out
    assert not (tmp_path / "foods.txt").exists()


def test_save_data_returns_true(tmp_path):
    app = DietManagerApp(tmp_path, input_func=feeder())
    assert app.save_data() is True
    assert (tmp_path / "profile.txt").exists()


def test_save_data_reports_failure(tmp_path, capsys):
    app = DietManagerApp(tmp_path / "missing", input_func=feeder())
    assert app.save_data() is False
    assert "- Food database not saved." in capsys.readouterr().out


def test_main_uses_data_dir(tmp_path, monkeypatch):
    answers = iter(["7"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert (tmp_path / "foods.txt").read_text() == ""


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])
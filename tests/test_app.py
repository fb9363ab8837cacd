from wirefdf.app import ESCAPE_KEYCODE, handle_keypress, main, render
from wirefdf.draw import WIN_HEIGHT, WIN_WIDTH
from wirefdf.mapfile import parse_row


def test_escape_closes(capsys):
    assert handle_keypress(ESCAPE_KEYCODE) is True
    assert capsys.readouterr().out == f"Key pressed: {ESCAPE_KEYCODE}\n"


def test_other_key_keeps_window(capsys):
    assert handle_keypress(97) is False
    assert "Key pressed: 97" in capsys.readouterr().out


def test_render_plots_points(capsys):
    rows = [parse_row("0 5 -3\n", 0), parse_row("1 1 1\n", 1)]
    image = render(rows, 0x0000FF)
    assert (image.width, image.height) == (WIN_WIDTH, WIN_HEIGHT)
    for row in rows:
        for point in row.points:
            assert image.pixel(point.x, point.y) == 0x0000FF
    assert image.pixel(10, 10) == 0
    out = capsys.readouterr().out
    assert "bits per pixel 32\n" in out
    assert f"line lenght {WIN_WIDTH * 4}\n" in out


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "No arguments" in capsys.readouterr().err


def test_main_too_many_arguments(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert "Too many arguments" in capsys.readouterr().err


def test_main_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Invalid file extension" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 1
    assert "[fdf] ERROR" in capsys.readouterr().err


def test_main_malformed_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("1 x 2\n")
    assert main([str(path)]) == 1
    assert "x" in capsys.readouterr().err
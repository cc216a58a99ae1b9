import io

from labsuite.life.field import Cell, Field
from labsuite.life.view import ALIVE_CHAR, DEAD_CHAR, SEPARATOR, render, show


def test_render_small_field():
    field = Field(2, 1)
    field[0, 0] = Cell.ALIVE
    assert render(field) == "0#\n----------\n"


def test_render_empty_field_is_only_separator():
    assert render(Field()) == SEPARATOR + "\n"


def test_render_shape():
    field = Field(4, 3)
    lines = render(field).splitlines()
    assert len(lines) == 4
    assert all(line == DEAD_CHAR * 4 for line in lines[:3])
    assert lines[-1] == SEPARATOR


def test_render_marks_alive_cells():
    field = Field(3, 3)
    field[2, 1] = Cell.ALIVE
    lines = render(field).splitlines()
    assert lines[1][2] == ALIVE_CHAR
    assert lines[1].count(ALIVE_CHAR) == 1


def test_show_writes_render():
    field = Field(3, 2)
    field[1, 1] = Cell.ALIVE
    stream = io.StringIO()
    show(field, stream)
    assert stream.getvalue() == render(field)


def test_show_defaults_to_stdout(capsys):
    field = Field(2, 2)
    show(field)
    assert capsys.readouterr().out == render(field)
import io

import pytest

from ppmlife.imageloader import (
    Color,
    Image,
    PPMError,
    format_image,
    read_data,
    write_data,
)


def _sample_image():
    return Image(
        (
            (Color(1, 2, 3), Color(4, 5, 6), Color(255, 0, 128)),
            (Color(0, 0, 0), Color(10, 20, 30), Color(200, 100, 50)),
        )
    )


def test_dimensions_and_pixel_access():
    image = _sample_image()
    assert image.rows == 2
    assert image.cols == 3
    assert image.pixel(1, 2) == Color(200, 100, 50)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Image(((Color(0, 0, 0),), (Color(0, 0, 0), Color(1, 1, 1))))


def test_color_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_format_header():
    text = format_image(_sample_image())
    lines = text.splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert len(lines) == 5


def test_format_single_row_pixel_layout():
    image = Image(((Color(1, 2, 3), Color(4, 5, 6)),))
    assert format_image(image) == "P3\n2 1\n255\n  1   2   3     4   5   6\n"


def test_round_trip_through_file(tmp_path):
    image = _sample_image()
    path = tmp_path / "img.ppm"
    path.write_text(format_image(image))
    assert read_data(path) == image


def test_read_tolerates_free_whitespace(tmp_path):
    path = tmp_path / "loose.ppm"
    path.write_text("P3 2 1\n255 1 2 3\n4\n5 6")
    image = read_data(path)
    assert image.pixels == ((Color(1, 2, 3), Color(4, 5, 6)),)


def test_write_data_to_stream_matches_format():
    image = _sample_image()
    buffer = io.StringIO()
    write_data(image, buffer)
    assert buffer.getvalue() == format_image(image)


def test_write_data_defaults_to_stdout(capsys):
    image = _sample_image()
    write_data(image)
    assert capsys.readouterr().out == format_image(image)


def test_missing_file(tmp_path):
    with pytest.raises(PPMError):
        read_data(tmp_path / "absent.ppm")


def test_wrong_magic(tmp_path):
    path = tmp_path / "p6.ppm"
    path.write_text("P6 1 1 255 0 0 0")
    with pytest.raises(PPMError):
        read_data(path)


def test_truncated_data(tmp_path):
    path = tmp_path / "short.ppm"
    path.write_text("P3 2 2 255 1 2 3 4 5")
    with pytest.raises(PPMError):
        read_data(path)


def test_non_numeric_value(tmp_path):
    path = tmp_path / "bad.ppm"
    path.write_text("P3 1 1 255 1 x 3")
    with pytest.raises(PPMError):
        read_data(path)
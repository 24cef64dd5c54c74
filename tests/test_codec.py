import pytest

from ppmedit import (
    BadDimensionsError,
    BadMagicError,
    Color,
    FormatError,
    Image,
    InvalidChannelValueError,
    PixelCountMismatchError,
    TruncatedPixelDataError,
    UnsupportedMaxValueError,
    decode,
    encode,
)


def test_decode_row_major():
    img = decode("P3 2 2 255  1 2 3  4 5 6  7 8 9  10 11 12")
    assert (img.width, img.height) == (2, 2)
    assert img.get(0, 0) == Color(1, 2, 3)
    assert img.get(1, 0) == Color(4, 5, 6)
    assert img.get(0, 1) == Color(7, 8, 9)
    assert img.get(1, 1) == Color(10, 11, 12)


def test_decode_any_whitespace_separates_tokens():
    text = "\n  P3\t2\n1\r\n255\n0\t0 0\n\n255 255\t255  \n"
    img = decode(text)
    assert img.get(0, 0) == Color(0, 0, 0)
    assert img.get(1, 0) == Color(255, 255, 255)


def test_decode_ignores_trailing_tokens():
    img = decode("P3 1 1 255 1 2 3 4 5 6 junk")
    assert img.get(0, 0) == Color(1, 2, 3)


def test_round_trip(random_image, gradient_image):
    assert decode(encode(random_image)) == random_image
    assert decode(encode(gradient_image)) == gradient_image


def test_encode_layout():
    img = Image(2, 1)
    img.set(0, 0, Color(1, 2, 3))
    img.set(1, 0, Color(255, 0, 128))
    assert encode(img) == "P3\n2 1\n255\n1 2 3\n255 0 128"


def test_encode_clamps_channels():
    img = Image(1, 1)
    img.pixels[0, 0] = (-3, 128, 999)
    assert encode(img).splitlines()[-1] == "0 128 255"


@pytest.mark.parametrize("text", [
    "P2 2 2 255 0 0 0 0 0 0 0 0 0 0 0 0",
    "",
    "p3 1 1 255 0 0 0",
])
def test_bad_magic(text):
    with pytest.raises(BadMagicError):
        decode(text)


@pytest.mark.parametrize("text", [
    "P3 0 2 255",
    "P3 2 -1 255",
    "P3 two 2 255",
    "P3 2.5 2 255",
    "P3 2",
    "P3",
])
def test_bad_dimensions(text):
    with pytest.raises(BadDimensionsError):
        decode(text)


@pytest.mark.parametrize("text", [
    "P3 1 1 100 10 10 10",
    "P3 1 1 65535 10 10 10",
    "P3 1 1 abc 10 10 10",
    "P3 1 1",
])
def test_unsupported_max_value(text):
    with pytest.raises(UnsupportedMaxValueError):
        decode(text)


def test_truncated_pixel_data_names_coordinate():
    with pytest.raises(TruncatedPixelDataError) as exc:
        decode("P3 1 1 255 10 10")
    assert (exc.value.x, exc.value.y) == (0, 0)
    assert "(0, 0)" in str(exc.value)


def test_truncated_later_pixel():
    with pytest.raises(TruncatedPixelDataError) as exc:
        decode("P3 2 2 255 1 1 1 2 2 2 3 3 3")
    assert (exc.value.x, exc.value.y) == (1, 1)


def test_invalid_channel_value_names_coordinate_and_triplet():
    with pytest.raises(InvalidChannelValueError) as exc:
        decode("P3 1 1 255 300 10 10")
    err = exc.value
    assert (err.x, err.y) == (0, 0)
    assert err.triplet == ("300", "10", "10")


@pytest.mark.parametrize("triplet", ["-1 0 0", "0 abc 0", "0 0 1.5", "0 0 256"])
def test_invalid_channel_tokens(triplet):
    with pytest.raises(InvalidChannelValueError):
        decode(f"P3 2 1 255 1 1 1 {triplet}")


def test_first_bad_pixel_wins():
    # pixel (0, 0) is invalid before pixel (1, 0) runs out of data
    with pytest.raises(InvalidChannelValueError) as exc:
        decode("P3 2 1 255 1 2 x 4 5")
    assert (exc.value.x, exc.value.y) == (0, 0)


def test_errors_are_format_errors():
    for cls in (BadMagicError, BadDimensionsError, UnsupportedMaxValueError,
                TruncatedPixelDataError, InvalidChannelValueError, PixelCountMismatchError):
        assert issubclass(cls, FormatError)
        assert issubclass(cls, ValueError)


def test_pixel_count_mismatch_message():
    err = PixelCountMismatchError(9, 8)
    assert (err.expected, err.actual) == (9, 8)
    assert "expected 9, but got 8" in str(err)


@pytest.mark.parametrize("text,error", [
    ("P3 2.5 1 255 0 0 0 0 0 0", BadDimensionsError),
    ("P3 1 1 255 1.9 0 0", InvalidChannelValueError),
    ("P3 1 1 255.0 0 0 0", UnsupportedMaxValueError),
])
def test_fractional_tokens_are_not_truncated(text, error):
    with pytest.raises(error):
        decode(text)

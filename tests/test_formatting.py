import os

import pytest

from msh.formatting import (
    Flag,
    FormatError,
    FormatSpec,
    convert,
    dprintf,
    format_string,
    parse_spec,
    printf,
)


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (3,)),
        ("%5d", (-42,)),
        ("%-5d|", (42,)),
        ("%-05d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (7,)),
        ("%+05d", (7,)),
        ("% d", (7,)),
        ("% 05d", (7,)),
        ("%.3d", (5,)),
        ("%8.3d", (-5,)),
        ("%u", (123,)),
        ("%x", (255,)),
        ("%#x", (255,)),
        ("%#08x", (255,)),
        ("%X", (48879,)),
        ("%#X", (48879,)),
        ("%-6x|", (10,)),
        ("%s", ("abc",)),
        ("%.2s", ("abcdef",)),
        ("%10s", ("hi",)),
        ("%-10s|", ("hi",)),
        ("%10.4s", ("abcdefg",)),
        ("%c", ("A",)),
        ("%c", (65,)),
        ("%3c", ("z",)),
        ("%-3c|", ("z",)),
        ("100%%", ()),
        ("%s is %d years", ("Ann", 30)),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_null_string_and_pointer():
    assert format_string("%s", None) == "(null)"
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_null_string_with_short_precision_is_empty():
    assert format_string("%8.3s|", None) == " " * 8 + "|"
    assert format_string("%.6s", None) == "(null)"


def test_zero_with_zero_precision_prints_nothing():
    assert format_string("%.0d", 0) == format_string("%.0x", 0) == format_string("%.0u", 0) == ""
    assert format_string("%5.0d", 0) == " " * 5


def test_pointer_is_prefixed_hex():
    address = 0xDEADBEEF
    assert format_string("%p", address) == "%#x" % address
    assert format_string("%020p", address) == "%#020x" % address


def test_integers_wrap_to_32_bits():
    assert format_string("%u", -1) == format_string("%u", 2**32 - 1)
    assert format_string("%x", -1) == format_string("%x", 2**32 - 1)
    assert format_string("%d", 2**31) == str(-(2**31))


def test_alt_flag_omits_prefix_for_zero():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_parse_spec_reads_flags_width_and_precision():
    fmt = "%-08.3x"
    spec, pos = parse_spec(fmt, 0, iter(()))
    assert spec == FormatSpec("x", width=8, precision=3, flags=Flag.MINUS | Flag.ZERO)
    assert pos == len(fmt)


def test_parse_spec_star_precision_takes_argument():
    spec, pos = parse_spec("%.*s!", 0, iter([2]))
    assert spec.precision == 2
    assert spec.specifier == "s"
    assert pos == 4


def test_parse_spec_without_percent_raises():
    with pytest.raises(FormatError):
        parse_spec("abc", 0, iter(()))


def test_star_precision_without_argument_raises():
    with pytest.raises(FormatError):
        format_string("%.*s")


def test_convert_applies_zero_padding_after_prefix():
    spec = FormatSpec("x", width=6, flags=Flag.ZERO | Flag.ALT)
    assert convert(spec, 255) == "%#06x" % 255


def test_convert_unknown_specifier_raises():
    with pytest.raises(FormatError):
        convert(FormatSpec("q"), 1)


@pytest.mark.parametrize("fmt", ["%q", "%", "value: %"])
def test_bad_conversion_raises(fmt):
    with pytest.raises(FormatError):
        format_string(fmt, 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(FormatError):
        format_string("%d", "seven")


def test_dprintf_writes_to_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        written = dprintf(write_fd, "%d-%s", 7, "x")
        os.close(write_fd)
        data = os.read(read_fd, 100)
    finally:
        os.close(read_fd)
    assert data == ("%d-%s" % (7, "x")).encode()
    assert written == len(data)


def test_printf_writes_to_stdout(capfd):
    written = printf("%s=%d\n", "status", 2)
    out, _ = capfd.readouterr()
    assert out == "%s=%d\n" % ("status", 2)
    assert written == len(out)
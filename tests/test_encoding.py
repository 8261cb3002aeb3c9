import base64

import pytest

from levelpipe.encoding import encode, encode_no_new_lines, encode_with_default_new_lines

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consetetur sadipscing elitr,\n"
    "sed diam nonumy eirmod tempor invidunt \n"
)


def test_can_encode_short_string():
    assert encode("Hallo Welt", 76) == "SGFsbG8gV2VsdA=="


def test_can_encode_long_string_without_new_line():
    assert encode_no_new_lines(LOREM_IPSUM) == (
        "TG9yZW0gaXBzdW0gZG9sb3Igc2l0IGFtZXQsIGNvbnNldGV0dXIgc2FkaXBzY2luZyBlbGl0ciwK"
        "c2VkIGRpYW0gbm9udW15IGVpcm1vZCB0ZW1wb3IgaW52aWR1bnQgCg=="
    )


def test_can_encode_long_string_with_new_line():
    result = encode_with_default_new_lines(LOREM_IPSUM)
    assert result == (
        "TG9yZW0gaXBzdW0gZG9sb3Igc2l0IGFtZXQsIGNvbnNldGV0dXIgc2FkaXBzY2luZyBlbGl0ciwK\n"
        "c2VkIGRpYW0gbm9udW15IGVpcm1vZCB0ZW1wb3IgaW52aWR1bnQgCg=="
    )
    assert result[76] == "\n"


@pytest.mark.parametrize("length", [1, 4, 7, 76])
def test_wrapped_lines_respect_length_and_round_trip(length):
    result = encode(LOREM_IPSUM, length)
    lines = result.split("\n")
    assert all(len(line) <= length for line in lines)
    assert all(len(line) == length for line in lines[:-1])
    assert base64.b64decode("".join(lines)).decode("utf-8") == LOREM_IPSUM


def test_bytes_and_str_give_same_result():
    assert encode(b"Hallo Welt", 76) == encode("Hallo Welt", 76)


def test_input_ends_at_first_nul():
    assert encode_no_new_lines("Hallo\0Welt") == encode_no_new_lines("Hallo")


def test_empty_input_gives_empty_output():
    assert encode_with_default_new_lines("") == ""


def test_zero_line_length_puts_newline_first():
    assert encode("Hallo Welt", 0) == "\nSGFsbG8gV2VsdA=="